"""API request/response Pydantic schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from clashyaml.models.errors import YAMLErrorDetail
from clashyaml.models.tokens import TokenSpan


class HighlightRequest(BaseModel):
    """Request body for POST /highlight."""

    text: str = Field(description="YAML text to tokenize")
    unit: Literal["utf16", "codepoint"] | None = Field(
        default=None, description="Offset unit; defaults to the server setting"
    )
    include_html: bool = False


class HighlightResponse(BaseModel):
    """Response body for POST /highlight."""

    unit: str
    spans: list[TokenSpan] = []
    html: str | None = None


class ValidateRequest(BaseModel):
    """Request body for POST /validate."""

    config_yaml: str = Field(description="Clash configuration YAML to validate")
    check_shape: bool = Field(
        default=True, description="Also warn about missing top-level Clash keys"
    )


class ValidateResponse(BaseModel):
    """Response body for POST /validate."""

    valid: bool
    diagnostics: str | None = None
    warnings: list[str] = []
    error: YAMLErrorDetail | None = None


class StyleInfo(BaseModel):
    """Display attributes for one token kind."""

    color: str | None = None
    bold: bool = False
    italic: bool = False


class ReferenceResponse(BaseModel):
    """Response for GET /reference."""

    main_sections: list[str] = []
    boolean_literals: list[str] = []
    null_literals: list[str] = []
    palette: dict[str, StyleInfo] = {}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
