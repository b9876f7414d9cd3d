"""Tests for scalar value classification."""

from __future__ import annotations

import pytest

from clashyaml.highlight.classifier import MAIN_SECTIONS, classify_value, is_number
from clashyaml.models.tokens import TokenKind


@pytest.mark.parametrize("value", ["true", "False", "YES", "no", "On", "off"])
def test_boolean_literals(value: str) -> None:
    assert classify_value(value) == TokenKind.BOOLEAN


@pytest.mark.parametrize("value", ["null", "NULL", "Null", "~"])
def test_null_literals(value: str) -> None:
    assert classify_value(value) == TokenKind.NULL


@pytest.mark.parametrize(
    "value",
    ["42", "-7", "+3", "0", "3.14", ".5", "5.", "1e10", "1.5E-3", "0x1F", "inf", "-Infinity", "nan"],
)
def test_numbers(value: str) -> None:
    assert classify_value(value) == TokenKind.NUMBER


@pytest.mark.parametrize(
    "value",
    [
        "rule",
        '"true"',
        "'42'",
        "1_000",
        "1.2.3",
        "0x",
        "1e",
        ".",
        "[a, b]",
        "{a: 1}",
        "127.0.0.1",
        "١٢",
        "",
    ],
)
def test_strings(value: str) -> None:
    assert classify_value(value) == TokenKind.STRING


def test_surrounding_whitespace_ignored() -> None:
    assert classify_value("  42 ") == TokenKind.NUMBER
    assert classify_value(" true\t") == TokenKind.BOOLEAN


def test_boolean_checked_before_number() -> None:
    # "on"/"off" would never parse as numbers, but literal priority is fixed
    assert classify_value("off") == TokenKind.BOOLEAN
    assert not is_number("off")


def test_main_sections_are_fixed() -> None:
    assert MAIN_SECTIONS == {
        "proxies",
        "proxy-groups",
        "rules",
        "proxy-providers",
        "script",
        "dns",
        "hosts",
        "tun",
    }
