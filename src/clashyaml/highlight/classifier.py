"""Scalar value classification and the fixed Clash literal tables."""

from __future__ import annotations

import re

from clashyaml.models.tokens import TokenKind

# Top-level Clash configuration keys that get section styling.
MAIN_SECTIONS = frozenset(
    {
        "proxies",
        "proxy-groups",
        "rules",
        "proxy-providers",
        "script",
        "dns",
        "hosts",
        "tun",
    }
)

BOOLEAN_LITERALS = frozenset({"true", "false", "yes", "no", "on", "off"})
NULL_LITERALS = frozenset({"null", "~"})

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)


def is_number(value: str) -> bool:
    """True when *value* reads entirely as an integer or floating-point literal."""
    return any(
        pattern.fullmatch(value)
        for pattern in (_INTEGER_RE, _DECIMAL_RE, _HEX_RE, _SPECIAL_FLOAT_RE)
    )


def classify_value(value: str) -> TokenKind:
    """Classify a trimmed scalar as boolean, null, number or string.

    No attempt is made to unwrap quotes or recognise flow collections:
    anything that is not one of the fixed literals or a number is a string.
    """
    trimmed = value.strip()
    lowered = trimmed.lower()
    if lowered in BOOLEAN_LITERALS:
        return TokenKind.BOOLEAN
    if lowered in NULL_LITERALS:
        return TokenKind.NULL
    if is_number(trimmed):
        return TokenKind.NUMBER
    return TokenKind.STRING
