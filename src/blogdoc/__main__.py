"""Command line entry point: ``python -m blogdoc``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from blogdoc.config import BLOGDOC_DEFAULT_THEME, BLOGDOC_LOG_LEVEL
from blogdoc.exceptions import ConfigError
from blogdoc.legacy_markup import convert_markup_to_html
from blogdoc.rendering import RenderMode, RenderOptions, render_content
from blogdoc.schemas.theme import THEMES
from blogdoc.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blogdoc", description="Render persisted blog post documents."
    )
    parser.add_argument("--log-level", default=BLOGDOC_LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a document file")
    render.add_argument("input", help="Document file, or - for stdin")
    render.add_argument(
        "--mode",
        choices=[mode.value for mode in RenderMode],
        default=RenderMode.FULL.value,
        help="Output to produce (default: full)",
    )
    render.add_argument(
        "--theme",
        choices=sorted(THEMES),
        default=BLOGDOC_DEFAULT_THEME,
        help="HTML theme for the full and preview modes",
    )
    render.add_argument(
        "--excerpt-length",
        type=int,
        default=None,
        help="Maximum excerpt length in characters (0 for no limit)",
    )
    render.add_argument("-o", "--output", default="-", help="Output file, or - for stdout")

    legacy = subparsers.add_parser("legacy", help="Convert free text with lightweight markup to HTML")
    legacy.add_argument("input", help="Text file, or - for stdin")
    legacy.add_argument("-o", "--output", default="-", help="Output file, or - for stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        content = _read_input(args.input)
    except OSError as exc:
        print(f"blogdoc: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    if args.command == "legacy":
        output = convert_markup_to_html(content)
    else:
        options = RenderOptions(
            mode=RenderMode(args.mode),
            theme=args.theme,
            excerpt_length=args.excerpt_length,
        )
        try:
            result = render_content(content, options)
        except ConfigError as exc:
            print(f"blogdoc: {exc}", file=sys.stderr)
            return 1
        if not result.parsed:
            logger.warning("Input is not a valid document; wrote %s fallback", result.mode)
        output = result.output

    try:
        _write_output(args.output, output)
    except OSError as exc:
        print(f"blogdoc: cannot write {args.output}: {exc}", file=sys.stderr)
        return 1
    return 0


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(target: str, output: str) -> None:
    if target == "-":
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
        return
    Path(target).write_text(output, encoding="utf-8")


if __name__ == "__main__":
    raise SystemExit(main())
