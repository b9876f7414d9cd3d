"""YAML loading and Clash configuration validation."""

from clashyaml.parser.loader import ConfigLoader, YAMLSafetyError
from clashyaml.parser.validator import (
    ConfigShapeValidator,
    parse,
    stringify,
    validate,
    validate_config_shape,
)

__all__ = [
    "ConfigLoader",
    "ConfigShapeValidator",
    "YAMLSafetyError",
    "parse",
    "stringify",
    "validate",
    "validate_config_shape",
]
