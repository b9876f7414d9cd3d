"""Command-line interface: validate a configuration or dump its highlight spans."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from clashyaml import __version__
from clashyaml.highlight import analyze
from clashyaml.highlight.offsets import OFFSET_UNITS
from clashyaml.parser.validator import validate, validate_config_shape
from clashyaml.settings import Settings

logger = logging.getLogger("clashyaml.cli")


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _cmd_check(args: argparse.Namespace, settings: Settings) -> int:
    text = _read_input(args.input)
    loader = settings.build_loader()
    if args.no_shape:
        result = validate(text, loader)
    else:
        result = validate_config_shape(text, loader)

    if not result.is_valid:
        print(f"invalid: {result.diagnostics}", file=sys.stderr)
        return 1
    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    print("valid")
    return 0


def _cmd_tokens(args: argparse.Namespace, settings: Settings) -> int:
    text = _read_input(args.input)
    unit = args.unit or settings.offset_unit
    spans = analyze(text, unit=unit)
    if args.json:
        print(json.dumps([span.model_dump(mode="json") for span in spans], indent=2))
        return 0
    for span in spans:
        print(f"{span.start}\t{span.length}\t{span.kind.value}\t{span.text!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clashyaml",
        description="Highlight and validate Clash configuration YAML",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Validate YAML syntax and configuration shape")
    check.add_argument("input", help="Configuration file, or - for stdin")
    check.add_argument("--no-shape", action="store_true",
                       help="Only check YAML syntax, skip the top-level key checks")
    check.set_defaults(handler=_cmd_check)

    tokens = sub.add_parser("tokens", help="Print the highlight spans of a file")
    tokens.add_argument("input", help="YAML file, or - for stdin")
    tokens.add_argument("--unit", choices=OFFSET_UNITS,
                        help="Offset unit (default: OFFSET_UNIT setting)")
    tokens.add_argument("--json", action="store_true", help="Emit spans as JSON")
    tokens.set_defaults(handler=_cmd_tokens)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``clashyaml`` console script."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    try:
        return args.handler(args, settings)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.input, exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
