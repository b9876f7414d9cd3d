"""Kind-to-style mapping and helpers that apply it to text.

The presentation layer styles spans in the order they were produced; a
later span overrides an earlier one wherever they overlap.  Spans that do
not fit inside the text are skipped rather than raising, since a span list
may be applied to a buffer that changed after it was computed.
"""

from __future__ import annotations

import html
from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass

from clashyaml.highlight.offsets import UTF16, codepoint_boundaries
from clashyaml.models.tokens import TokenKind, TokenSpan


@dataclass(frozen=True)
class Style:
    """Visual attributes for one token kind.  ``color`` of None means default text."""

    color: str | None = None
    bold: bool = False
    italic: bool = False

    def css(self) -> str:
        parts: list[str] = []
        if self.color:
            parts.append(f"color: {self.color}")
        if self.bold:
            parts.append("font-weight: bold")
        if self.italic:
            parts.append("font-style: italic")
        return "; ".join(parts)


PALETTE: dict[TokenKind, Style] = {
    TokenKind.MAIN_SECTION: Style(color="#007aff", bold=True),
    TokenKind.KEY: Style(color="#af52de"),
    TokenKind.VALUE: Style(),
    TokenKind.STRING: Style(),
    TokenKind.COMMENT: Style(color="#6a9955", italic=True),
    TokenKind.ARRAY_MARKER: Style(color="#ff9500"),
    TokenKind.NUMBER: Style(color="#30b0c7"),
    TokenKind.BOOLEAN: Style(color="#ff3b30", bold=True),
    TokenKind.NULL: Style(color="#8e8e93", italic=True),
}

StyledRun = tuple[str, TokenKind | None]


def _group(text: str, kinds: list[TokenKind | None]) -> list[StyledRun]:
    """Collapse per-character kinds into maximal runs of equal kind."""
    runs: list[StyledRun] = []
    begin = 0
    for index in range(1, len(text) + 1):
        if index == len(text) or kinds[index] != kinds[begin]:
            runs.append((text[begin:index], kinds[begin]))
            begin = index
    return runs


def apply_styles(
    text: str, spans: Iterable[TokenSpan], unit: str = UTF16
) -> list[StyledRun]:
    """Split *text* into ``(fragment, kind)`` runs covering it completely.

    Unstyled fragments carry ``None``.  The run list is directly usable by
    widgets that take labelled fragments (e.g. Gradio ``HighlightedText``).
    """
    boundaries = codepoint_boundaries(text, unit)
    total = boundaries[-1]
    kinds: list[TokenKind | None] = [None] * len(text)
    for span in spans:
        if span.start < 0 or span.end > total:
            continue
        first = bisect_left(boundaries, span.start)
        last = bisect_left(boundaries, span.end)
        kinds[first:last] = [span.kind] * (last - first)
    return _group(text, kinds)


def render_html(
    text: str,
    spans: Iterable[TokenSpan],
    unit: str = UTF16,
    palette: dict[TokenKind, Style] | None = None,
) -> str:
    """Render *text* as an HTML ``<pre>`` block with inline-styled spans."""
    palette = palette or PALETTE
    parts = ['<pre class="clash-yaml">']
    for fragment, kind in apply_styles(text, spans, unit):
        escaped = html.escape(fragment)
        css = palette[kind].css() if kind is not None else ""
        if css:
            parts.append(f'<span class="tok-{kind.value}" style="{css}">{escaped}</span>')
        else:
            parts.append(escaped)
    parts.append("</pre>")
    return "".join(parts)


def highlight_line(line: str) -> list[StyledRun]:
    """Quick single-line highlighting used while no full pass is available.

    A line that is a comment is styled as a whole.  Otherwise everything
    before the first colon is a key (a main section when the line is not
    indented) and a leading dash is an array marker.
    """
    stripped = line.strip()
    if stripped.startswith("#"):
        return [(line, TokenKind.COMMENT)] if line else []

    kinds: list[TokenKind | None] = [None] * len(line)
    colon_at = line.find(":")
    if colon_at > 0:
        indented = line.startswith(" ")
        kinds[:colon_at] = [TokenKind.KEY if indented else TokenKind.MAIN_SECTION] * colon_at
    if stripped.startswith("-"):
        dash_at = line.find("-")
        kinds[dash_at] = TokenKind.ARRAY_MARKER
    return _group(line, kinds)
