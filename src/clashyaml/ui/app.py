"""Gradio editor with a live highlighted preview and validation panel."""

from __future__ import annotations

from typing import Any

from clashyaml.highlight import CODEPOINT, PALETTE, analyze, apply_styles
from clashyaml.parser.validator import validate_config_shape

_EXAMPLE_CONFIG = """\
# Minimal Clash configuration
port: 7890
socks-port: 7891
allow-lan: false
mode: rule
log-level: info
external-controller: 127.0.0.1:9090

dns:
  enable: true
  ipv6: off
  nameserver:
    - 223.5.5.5
    - https://doh.pub/dns-query

proxies:
  - name: "hk-01"
    type: ss
    server: hk.example.com
    port: 8388
    cipher: aes-128-gcm
    password: "secret#1"  # quoted hash still starts a comment
    udp: true

proxy-groups:
  - name: Proxy
    type: select
    proxies: [hk-01, DIRECT]

rules:
  - DOMAIN-SUFFIX,google.com,Proxy
  - GEOIP,CN,DIRECT
  - MATCH,Proxy
"""

_CSS = """\
.gradio-container { max-width: 100% !important; padding: 4px 16px !important; }
.yaml-preview { font-family: ui-monospace, monospace; white-space: pre; }
"""

# HighlightedText labels are the token kind values; kinds rendered as
# plain text carry no label.
COLOR_MAP: dict[str, str] = {
    kind.value: style.color for kind, style in PALETTE.items() if style.color is not None
}


def highlight_runs(text: str) -> list[tuple[str, str | None]]:
    """Split the editor text into labelled fragments for ``HighlightedText``."""
    spans = analyze(text, unit=CODEPOINT)
    return [
        (fragment, kind.value if kind is not None and kind.value in COLOR_MAP else None)
        for fragment, kind in apply_styles(text, spans, unit=CODEPOINT)
    ]


def validation_markdown(text: str) -> str:
    """Summarise the validation result as Markdown."""
    result = validate_config_shape(text)
    if not result.is_valid:
        return f"**Invalid:** {result.diagnostics}"
    if result.warnings:
        items = "\n".join(f"- {w}" for w in result.warnings)
        return f"**Valid YAML**, but the configuration may be incomplete:\n\n{items}"
    return "**Valid configuration.**"


def _refresh(text: str) -> tuple[list[tuple[str, str | None]], str]:
    return highlight_runs(text), validation_markdown(text)


def create_blocks() -> Any:
    """Build and return a ``gr.Blocks`` instance (without launching)."""
    import gradio as gr

    from clashyaml import __version__

    with gr.Blocks(title="clashyaml") as demo:
        gr.Markdown(f"## Clash configuration editor <small>v{__version__}</small>")
        with gr.Row(equal_height=True):
            editor = gr.Textbox(
                value=_EXAMPLE_CONFIG,
                label="Configuration (YAML)",
                lines=24,
                scale=1,
            )
            preview = gr.HighlightedText(
                value=highlight_runs(_EXAMPLE_CONFIG),
                label="Highlighted",
                color_map=COLOR_MAP,
                combine_adjacent=True,
                show_legend=True,
                elem_classes=["yaml-preview"],
                scale=1,
            )
        status = gr.Markdown(validation_markdown(_EXAMPLE_CONFIG))

        editor.change(fn=_refresh, inputs=[editor], outputs=[preview, status])

    return demo


def create_ui() -> None:
    """Build and launch the Gradio interface."""
    import os

    port = int(os.environ.get("PORT", "7860"))
    demo = create_blocks()
    demo.launch(server_name="0.0.0.0", server_port=port, css=_CSS)


def main() -> None:
    """Entry point for ``clashyaml-ui`` console script."""
    create_ui()
