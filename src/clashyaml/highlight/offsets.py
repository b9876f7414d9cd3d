"""Code-unit accounting for span offsets.

Text widgets disagree on how they index strings.  Spans are measured in
UTF-16 code units by default (what most native text views use); the
``codepoint`` unit matches plain Python string indexing.
"""

from __future__ import annotations

from collections.abc import Callable

UTF16 = "utf16"
CODEPOINT = "codepoint"

OFFSET_UNITS = (UTF16, CODEPOINT)


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def unit_measure(unit: str) -> Callable[[str], int]:
    """Return a function measuring the length of a string in *unit*."""
    if unit == UTF16:
        return _utf16_length
    if unit == CODEPOINT:
        return len
    raise ValueError(f"Unknown offset unit '{unit}' (expected one of {', '.join(OFFSET_UNITS)})")


def slice_units(text: str, start: int, length: int, unit: str = UTF16) -> str:
    """Return the substring of *text* covering ``[start, start + length)`` in *unit*."""
    if unit == CODEPOINT:
        return text[start : start + length]
    if unit != UTF16:
        raise ValueError(f"Unknown offset unit '{unit}'")
    data = text.encode("utf-16-le", "surrogatepass")
    return data[2 * start : 2 * (start + length)].decode("utf-16-le", "surrogatepass")


def codepoint_boundaries(text: str, unit: str = UTF16) -> list[int]:
    """Unit offset of every code point in *text*, plus the total length."""
    measure = unit_measure(unit)
    boundaries = [0]
    for char in text:
        boundaries.append(boundaries[-1] + measure(char))
    return boundaries
