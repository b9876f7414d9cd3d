"""FastMCP server exposing clashyaml's highlighter and validator as MCP tools.

Run via::

    clashyaml-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http clashyaml-mcp    # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  clashyaml-mcp    # legacy SSE on port 9000

Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import json
import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from clashyaml import __version__
from clashyaml.highlight import analyze
from clashyaml.highlight.classifier import BOOLEAN_LITERALS, MAIN_SECTIONS, NULL_LITERALS
from clashyaml.highlight.offsets import OFFSET_UNITS, UTF16
from clashyaml.parser.loader import ConfigLoader
from clashyaml.parser.validator import validate, validate_config_shape
from clashyaml.settings import Settings

# ---------------------------------------------------------------------------
# Server + shared state
# ---------------------------------------------------------------------------

logger = logging.getLogger("clashyaml.mcp")

mcp = FastMCP("clashyaml")
_loader: ConfigLoader = ConfigLoader()
_default_unit: str = UTF16


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

CLASH_REFERENCE = f"""\
# Clash configuration highlighting reference

Main sections (styled as sections when used as a key):
  {", ".join(sorted(MAIN_SECTIONS))}

Boolean literals (case-insensitive): {", ".join(sorted(BOOLEAN_LITERALS))}
Null literals (case-insensitive): {", ".join(sorted(NULL_LITERALS))}

Token kinds: key, value, comment, array_marker, string, number, boolean,
null, main_section.

A complete configuration is expected to declare `port`, `socks-port`,
`proxies` or `proxy-providers`, and `rules`.  Missing keys are reported as
warnings; only YAML syntax errors make a configuration invalid.
"""


@mcp.resource("clash://reference")
def clash_reference() -> str:
    """Literal tables and token kinds used by the highlighter."""
    return CLASH_REFERENCE


@mcp.tool
def get_clash_reference() -> str:
    """Get the highlighting and validation reference for Clash configurations."""
    return CLASH_REFERENCE


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool
def highlight_yaml(text: str, unit: str | None = None) -> str:
    """Tokenize YAML text into classified spans (JSON list).

    Each span has ``kind``, ``start``, ``length`` and ``text``.

    Args:
        text: YAML text to tokenize.
        unit: Offset unit, ``utf16`` or ``codepoint`` (server default if omitted).
    """
    unit = unit or _default_unit
    if unit not in OFFSET_UNITS:
        raise ToolError(f"Unknown offset unit '{unit}'. Use one of: {', '.join(OFFSET_UNITS)}")
    logger.info("highlight_yaml called (text length=%d, unit=%s)", len(text), unit)
    spans = analyze(text, unit=unit)
    return json.dumps([span.model_dump(mode="json") for span in spans])


@mcp.tool
def validate_config(config_yaml: str, check_shape: bool = True) -> str:
    """Validate a Clash configuration.

    Reports YAML syntax errors with line and column.  With ``check_shape``
    also lists missing top-level keys as warnings.

    Args:
        config_yaml: Complete configuration YAML.
        check_shape: Warn about missing port, socks-port, proxies and rules.
    """
    logger.info("validate_config called (yaml length=%d)", len(config_yaml))
    logger.debug("validate_config yaml:\n%s", config_yaml)
    if check_shape:
        result = validate_config_shape(config_yaml, _loader)
    else:
        result = validate(config_yaml, _loader)

    if not result.is_valid:
        return f"Configuration is invalid:\n  {result.diagnostics}"
    msg = "Configuration is valid."
    if result.warnings:
        msg += "\nWarnings:"
        for warning in result.warnings:
            msg += f"\n  - {warning}"
    return msg


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "clashyaml MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    global _loader, _default_unit  # noqa: PLW0603
    _loader = settings.build_loader()
    _default_unit = settings.offset_unit

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
