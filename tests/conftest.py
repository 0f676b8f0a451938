from __future__ import annotations

import io
from typing import Callable

import pytest

from markdown_marker.config import RendererConfig
from markdown_marker.errors import FormatError
from markdown_marker.models.nodes import (
    DocumentNode,
    Node,
    ParagraphNode,
    TableCellNode,
    TableHeaderNode,
    TableNode,
    TableRowNode,
    TextNode,
)
from markdown_marker.parser import markdown_to_nodes
from markdown_marker.renderers import MarkdownRenderer


class FailingFormatter:
    """Formatter stand-in that rejects every input."""

    def __init__(self, message: str = "syntax error", language: str = "go") -> None:
        self.message = message
        self.language = language
        self.calls: list[str] = []

    def format(self, code: str) -> str:
        self.calls.append(code)
        raise FormatError(self.message, language=self.language, stderr="1:1: expected 'package'")


class UpperFormatter:
    def format(self, code: str) -> str:
        return code.upper()


@pytest.fixture
def failing_formatter() -> FailingFormatter:
    return FailingFormatter()


@pytest.fixture
def upper_formatter() -> UpperFormatter:
    return UpperFormatter()


@pytest.fixture
def render_nodes() -> Callable[..., str]:
    """Render a document built from ``children`` with the given config overrides."""

    def _render(*children: Node, **config) -> str:
        renderer = MarkdownRenderer(RendererConfig(**config))
        return renderer.render_to_string(DocumentNode(children=tuple(children)))

    return _render


@pytest.fixture
def render_source() -> Callable[..., str]:
    """Parse Markdown source and render it with the given config overrides."""

    def _render(source: str, **config) -> str:
        renderer = MarkdownRenderer(RendererConfig(**config))
        sink = io.StringIO()
        renderer.render(markdown_to_nodes(source), sink)
        return sink.getvalue()

    return _render


@pytest.fixture
def paragraph_factory() -> Callable[..., ParagraphNode]:
    def _factory(*lines: str) -> ParagraphNode:
        text = "".join(lines)
        return ParagraphNode(lines=tuple(lines), children=(TextNode(value=text.strip()),))

    return _factory


@pytest.fixture
def table_factory() -> Callable[..., TableNode]:
    """Build a table from a header row and body rows of cell strings."""

    def _cell(text: str) -> TableCellNode:
        return TableCellNode(lines=(text,) if text else (), children=(TextNode(value=text),) if text else ())

    def _factory(header: list[str], *rows: list[str]) -> TableNode:
        children: list[Node] = [TableHeaderNode(children=tuple(_cell(text) for text in header))]
        children.extend(TableRowNode(children=tuple(_cell(text) for text in row)) for row in rows)
        return TableNode(children=tuple(children))

    return _factory
