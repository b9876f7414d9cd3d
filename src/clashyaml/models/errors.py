"""Structured validation results with YAML source positions."""

from __future__ import annotations

from pydantic import BaseModel


class YAMLErrorDetail(BaseModel):
    """Describes why a document failed to parse.

    ``line`` and ``column`` are 1-based and only present when the
    underlying parser reported a position.
    """

    category: str
    problem: str
    context: str | None = None
    line: int | None = None
    column: int | None = None


class ValidationResult(BaseModel):
    """Outcome of a syntax or configuration-shape validation."""

    is_valid: bool
    diagnostics: str | None = None
    warnings: list[str] = []
    error: YAMLErrorDetail | None = None
