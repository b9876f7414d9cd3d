"""Syntax validation and Clash configuration shape checks.

Syntax errors make a document invalid.  Shape checks (missing ports,
proxies or rules) only produce advisory warnings; a configuration can be
incomplete on purpose, for example when it is merged with a subscription.
Nothing in this module raises for bad input: every failure is returned as
a ``ValidationResult``.
"""

from __future__ import annotations

import logging
from typing import Any

from ruamel.yaml.composer import ComposerError
from ruamel.yaml.constructor import ConstructorError, DuplicateKeyError
from ruamel.yaml.error import MarkedYAMLError, YAMLError
from ruamel.yaml.parser import ParserError
from ruamel.yaml.representer import RepresenterError
from ruamel.yaml.scanner import ScannerError

from clashyaml.models.errors import ValidationResult, YAMLErrorDetail
from clashyaml.parser.loader import ConfigLoader, YAMLSafetyError

logger = logging.getLogger("clashyaml.parser")

PARSE_FAILURE_MESSAGE = "cannot parse configuration"

_ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (ScannerError, "scanning"),
    (ParserError, "syntax"),
    (ComposerError, "composition"),
    (DuplicateKeyError, "construction"),
    (ConstructorError, "construction"),
    (RepresenterError, "representation"),
    (YAMLSafetyError, "safety"),
)

_default_loader = ConfigLoader()


# ---------------------------------------------------------------------------
# Error formatting
# ---------------------------------------------------------------------------


def describe_error(exc: Exception) -> YAMLErrorDetail:
    """Extract category, problem text and 1-based position from a load failure."""
    category = next(
        (name for exc_type, name in _ERROR_CATEGORIES if isinstance(exc, exc_type)),
        "generic",
    )
    if isinstance(exc, MarkedYAMLError):
        mark = exc.problem_mark or exc.context_mark
        return YAMLErrorDetail(
            category=category,
            problem=exc.problem or str(exc),
            context=exc.context,
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
        )
    return YAMLErrorDetail(category=category, problem=str(exc) or type(exc).__name__)


def format_error(detail: YAMLErrorDetail) -> str:
    """Render a ``YAMLErrorDetail`` as a single human-readable line."""
    if detail.category == "generic":
        return f"YAML error: {detail.problem}"
    message = f"YAML {detail.category} error"
    if detail.context:
        message += f": {detail.context}"
    message += f" - {detail.problem}"
    if detail.line is not None:
        message += f" (line {detail.line}, column {detail.column})"
    return message


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate(text: str, loader: ConfigLoader | None = None) -> ValidationResult:
    """Check that *text* is syntactically valid YAML."""
    loader = loader or _default_loader
    try:
        loader.load_string(text)
    except (YAMLError, YAMLSafetyError) as exc:
        detail = describe_error(exc)
    except Exception as exc:
        # Constructors can fail outside the YAMLError hierarchy (e.g. bad dates).
        detail = YAMLErrorDetail(category="generic", problem=str(exc) or type(exc).__name__)
    else:
        return ValidationResult(is_valid=True)

    message = format_error(detail)
    logger.debug("YAML validation failed: %s", message)
    return ValidationResult(is_valid=False, diagnostics=message, error=detail)


def parse(text: str, loader: ConfigLoader | None = None) -> dict[str, Any] | None:
    """Parse *text* into a key-ordered mapping.

    Returns ``None`` when parsing fails or the document is not a mapping.
    """
    loader = loader or _default_loader
    try:
        data = loader.load_string(text)
    except Exception as exc:
        logger.debug("YAML parse failed: %s", exc)
        return None
    if not isinstance(data, dict):
        return None
    return data


def stringify(mapping: dict[str, Any], loader: ConfigLoader | None = None) -> str | None:
    """Serialise *mapping* back to YAML text.  Returns ``None`` on failure."""
    loader = loader or _default_loader
    try:
        return loader.dump_string(mapping)
    except YAMLError as exc:
        logger.warning("Cannot serialise mapping to YAML: %s", exc)
        return None


class ConfigShapeValidator:
    """Advisory checks on the top-level keys of a Clash configuration."""

    def check(self, config: dict[str, Any]) -> list[str]:
        warnings: list[str] = []
        warnings.extend(self._check_port(config))
        warnings.extend(self._check_socks_port(config))
        warnings.extend(self._check_proxy_sources(config))
        warnings.extend(self._check_rules(config))
        return warnings

    def _check_port(self, config: dict[str, Any]) -> list[str]:
        if "port" not in config:
            return ["missing 'port' field"]
        return []

    def _check_socks_port(self, config: dict[str, Any]) -> list[str]:
        if "socks-port" not in config:
            return ["missing 'socks-port' field"]
        return []

    def _check_proxy_sources(self, config: dict[str, Any]) -> list[str]:
        """Proxies may be inline or come from providers; either is enough."""
        if "proxies" not in config and "proxy-providers" not in config:
            return ["missing 'proxies' or 'proxy-providers' field"]
        return []

    def _check_rules(self, config: dict[str, Any]) -> list[str]:
        if "rules" not in config:
            return ["missing 'rules' field"]
        return []


def validate_config_shape(
    text: str, loader: ConfigLoader | None = None
) -> ValidationResult:
    """Validate syntax, then warn about missing top-level Clash keys.

    Shape warnings never make the result invalid; only syntax errors do.
    """
    result = validate(text, loader)
    if not result.is_valid:
        return result

    config = parse(text, loader)
    if config is None:
        return ValidationResult(is_valid=False, diagnostics=PARSE_FAILURE_MESSAGE)

    warnings = ConfigShapeValidator().check(config)
    if warnings:
        logger.debug("Configuration shape warnings: %s", "; ".join(warnings))
        return ValidationResult(is_valid=True, diagnostics="\n".join(warnings), warnings=warnings)
    return ValidationResult(is_valid=True)
