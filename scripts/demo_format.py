"""Minimal demo script for parsing Markdown and printing its formatted rendering."""

from __future__ import annotations

import argparse
from pathlib import Path

from markdown_marker.config import RendererConfig
from markdown_marker.formatters import json_registration
from markdown_marker.models.nodes import Node
from markdown_marker.parser import load_markdown_path
from markdown_marker.renderers import MarkdownRenderer


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the node tree and rendering of a Markdown file.")
    parser.add_argument("path", type=Path, help="Path to a Markdown document.")
    parser.add_argument("--width", type=int, default=80, help="Maximum line width.")
    args = parser.parse_args()

    document = load_markdown_path(args.path)
    print(f"Parsed {args.path} into {len(document.children)} top-level blocks:\n")
    _print_tree(document, indent=0)

    renderer = MarkdownRenderer(RendererConfig(max_width=args.width, formatters=(json_registration(),)))
    print("\nRendered:\n")
    print(renderer.render_to_string(document), end="")


def _print_tree(node: Node, indent: int) -> None:
    prefix = " " * indent
    label = node.content.splitlines()[0][:60] if node.content else ""
    print(f"{prefix}- {node.kind.value}", end="")
    if label:
        print(f": {label}")
    else:
        print()
    for child in node.children:
        _print_tree(child, indent=indent + 2)


if __name__ == "__main__":
    main()
