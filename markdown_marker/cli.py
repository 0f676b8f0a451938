"""Command-line entry point: format a Markdown file or stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from markdown_marker.config import HardBreakPolicy, ListNumbering, MarkerSettings, RendererConfig
from markdown_marker.errors import MarkerError
from markdown_marker.formatters import FormatterRegistration, gofmt_registration, json_registration
from markdown_marker.parser import markdown_to_nodes
from markdown_marker.renderers import MarkdownRenderer

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None, settings: MarkerSettings | None = None) -> argparse.Namespace:
    settings = settings or MarkerSettings()
    parser = argparse.ArgumentParser(
        prog="markdown-marker",
        description="Pretty-print Markdown with reflowed paragraphs, aligned tables and formatted code.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Markdown file to format (default: read stdin).",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=settings.max_width,
        help="Maximum line width for reflowed prose (default: %(default)s).",
    )
    parser.add_argument(
        "--gofmt",
        action="store_true",
        default=settings.gofmt,
        help="Format go/golang code blocks with gofmt.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=settings.format_json,
        help="Re-indent json code blocks.",
    )
    parser.add_argument(
        "--hard-breaks",
        choices=[policy.value for policy in HardBreakPolicy],
        default=settings.hard_breaks.value,
        help="How hard line breaks inside paragraphs are written (default: %(default)s).",
    )
    parser.add_argument(
        "--list-numbering",
        choices=[numbering.value for numbering in ListNumbering],
        default=settings.list_numbering.value,
        help="How ordered list items are numbered (default: %(default)s).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the result to this file instead of stdout.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    args = parser.parse_args(argv)
    if args.width < 1:
        parser.error("--width must be a positive integer")
    return args


def build_config(args: argparse.Namespace, settings: MarkerSettings) -> RendererConfig:
    formatters: list[FormatterRegistration] = []
    if args.gofmt:
        formatters.append(gofmt_registration(settings.gofmt_executable))
    if args.json:
        formatters.append(json_registration())
    return RendererConfig(
        max_width=args.width,
        hard_breaks=HardBreakPolicy(args.hard_breaks),
        list_numbering=ListNumbering(args.list_numbering),
        formatters=tuple(formatters),
    )


def main(argv: Sequence[str] | None = None) -> int:
    settings = MarkerSettings()
    args = parse_args(argv, settings)

    logging.basicConfig(
        level=logging.ERROR if args.quiet else settings.log_level.upper(),
        format="[%(levelname)s] %(message)s",
    )

    if args.path is None:
        source = sys.stdin.read()
    else:
        source = args.path.read_text(encoding="utf-8")

    document = markdown_to_nodes(source)
    renderer = MarkdownRenderer(build_config(args, settings))
    logger.info("Formatting %s at width %d", args.path or "<stdin>", args.width)

    try:
        if args.output is None:
            _render(renderer, document, sys.stdout)
        else:
            with args.output.open("w", encoding="utf-8") as handle:
                _render(renderer, document, handle)
    except MarkerError as exc:
        print(f"markdown-marker: {exc}", file=sys.stderr)
        return 1
    return 0


def _render(renderer: MarkdownRenderer, document, sink: TextIO) -> None:
    renderer.render(document, sink)
    sink.flush()


if __name__ == "__main__":
    raise SystemExit(main())
