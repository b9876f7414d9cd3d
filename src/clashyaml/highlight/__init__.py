"""Line-oriented YAML tokenizer and style palette for editor highlighting."""

from clashyaml.highlight.classifier import classify_value
from clashyaml.highlight.offsets import CODEPOINT, UTF16, slice_units
from clashyaml.highlight.palette import PALETTE, Style, apply_styles, highlight_line, render_html
from clashyaml.highlight.tokenizer import analyze

__all__ = [
    "CODEPOINT",
    "PALETTE",
    "UTF16",
    "Style",
    "analyze",
    "apply_styles",
    "classify_value",
    "highlight_line",
    "render_html",
    "slice_units",
]
