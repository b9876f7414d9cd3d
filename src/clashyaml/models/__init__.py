"""Token and validation result models."""

from clashyaml.models.errors import ValidationResult, YAMLErrorDetail
from clashyaml.models.tokens import TokenKind, TokenSpan

__all__ = [
    "TokenKind",
    "TokenSpan",
    "ValidationResult",
    "YAMLErrorDetail",
]
