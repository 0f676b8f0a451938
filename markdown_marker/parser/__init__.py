"""Parsing helpers."""

from .markdown_parser import (
    MarkdownAst,
    ast_to_nodes,
    load_markdown_path,
    markdown_to_nodes,
    parse_markdown,
)

__all__ = [
    "MarkdownAst",
    "parse_markdown",
    "markdown_to_nodes",
    "load_markdown_path",
    "ast_to_nodes",
]
