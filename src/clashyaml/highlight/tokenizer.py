"""Line-oriented YAML tokenizer for editor syntax highlighting.

Each line is classified on its own, without any lexer state carried from
the previous line, so half-typed or malformed YAML only affects the line
being edited.  The scan is deliberately naive:

* the first ``#`` on a line starts a comment, even inside a quoted value;
* the first ``:`` splits key from value;
* a line whose first non-blank character is ``-`` gets an array marker.

Spans for a line are emitted in the order comment, key, value, array
marker, and lines are processed in document order.  The result is grouped
per line but not sorted by position within a line.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

from clashyaml.highlight.classifier import MAIN_SECTIONS, classify_value
from clashyaml.highlight.offsets import UTF16, unit_measure
from clashyaml.models.tokens import TokenKind, TokenSpan

# Every terminator counts as exactly one code unit, so "\r\n" produces an
# empty line between the two characters.
_LINE_BREAK_RE = re.compile("[\n\r\x0b\x0c\x85\u2028\u2029]")


def analyze(text: str, unit: str = UTF16) -> list[TokenSpan]:
    """Tokenize *text* into classified spans.

    Never raises for any input string; an empty or unrecognisable document
    simply yields fewer (possibly zero) spans.  Offsets are measured in
    *unit* (``"utf16"`` or ``"codepoint"``).
    """
    measure = unit_measure(unit)
    spans: list[TokenSpan] = []
    line_start = 0
    for line in _LINE_BREAK_RE.split(text):
        spans.extend(_analyze_line(line, line_start, measure))
        line_start += measure(line) + 1
    return spans


def _first_non_space(line: str, begin: int = 0) -> int:
    for index in range(begin, len(line)):
        if not line[index].isspace():
            return index
    return len(line)


def _analyze_line(
    line: str, line_start: int, measure: Callable[[str], int]
) -> Iterator[TokenSpan]:
    def _span(kind: TokenKind, begin: int, end: int) -> TokenSpan:
        return TokenSpan(
            kind=kind,
            start=line_start + measure(line[:begin]),
            length=measure(line[begin:end]),
            text=line[begin:end],
        )

    comment_at = line.find("#")
    if comment_at >= 0:
        yield _span(TokenKind.COMMENT, comment_at, len(line))

    colon_at = line.find(":")
    if colon_at >= 0:
        key = line[:colon_at].strip()
        if key:
            key_at = _first_non_space(line)
            kind = TokenKind.MAIN_SECTION if key in MAIN_SECTIONS else TokenKind.KEY
            yield _span(kind, key_at, key_at + len(key))

            # A trailing comment never belongs to the value.
            value_end = comment_at if comment_at > colon_at else len(line)
            value = line[colon_at + 1 : value_end].strip()
            if value and not value.startswith("#"):
                value_at = _first_non_space(line, colon_at + 1)
                yield _span(classify_value(value), value_at, value_at + len(value))

    if line.lstrip().startswith("-"):
        dash_at = line.find("-")
        yield _span(TokenKind.ARRAY_MARKER, dash_at, dash_at + 1)
