"""Classified spans produced by the YAML tokenizer."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(str, Enum):
    """Semantic category of a highlighted span."""

    KEY = "key"
    VALUE = "value"
    COMMENT = "comment"
    ARRAY_MARKER = "array_marker"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    MAIN_SECTION = "main_section"


class TokenSpan(BaseModel):
    """A half-open range ``[start, start + length)`` of the source text.

    ``start`` and ``length`` are expressed in the code units the span list
    was produced with (UTF-16 by default).  ``text`` always equals the
    covered slice of the source.
    """

    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    start: int = Field(ge=0)
    length: int = Field(ge=0)
    text: str

    @property
    def end(self) -> int:
        return self.start + self.length
