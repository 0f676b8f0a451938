"""Shared building blocks for typed parse-tree nodes."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class NodeKind(str, Enum):
    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    TEXT_BLOCK = "text_block"
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "code_block"
    FENCED_CODE_BLOCK = "fenced_code_block"
    HTML_BLOCK = "html_block"
    LIST = "list"
    LIST_ITEM = "list_item"
    THEMATIC_BREAK = "thematic_break"
    LINK_DEFINITION = "link_definition"
    TABLE = "table"
    TABLE_HEADER = "table_header"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    AUTO_LINK = "auto_link"
    CODE_SPAN = "code_span"
    EMPHASIS = "emphasis"
    IMAGE = "image"
    LINK = "link"
    RAW_HTML = "raw_html"
    TEXT = "text"
    STRING = "string"


class Node(BaseModel):
    """Immutable representation of a parse-tree node.

    ``lines`` holds the raw source runs the node spans (for prose, code and
    table cells). Children receive a non-owning back-reference to the node
    that adopts them; the reference is not a model field and is never
    serialised.
    """

    kind: NodeKind
    children: tuple[Node, ...] = Field(default_factory=tuple)
    lines: tuple[str, ...] = Field(default_factory=tuple)

    _parent: Node | None = PrivateAttr(default=None)

    model_config = ConfigDict(frozen=True)

    def model_post_init(self, context: Any, /) -> None:
        for child in self.children:
            child._parent = self

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def next_sibling(self) -> Node | None:
        if self._parent is None:
            return None
        siblings = self._parent.children
        for index, sibling in enumerate(siblings):
            if sibling is self:
                return siblings[index + 1] if index + 1 < len(siblings) else None
        return None

    @property
    def content(self) -> str:
        """Concatenation of the node's raw source runs."""
        return "".join(self.lines)

    def is_top_level(self) -> bool:
        return self._parent is not None and self._parent.kind is NodeKind.DOCUMENT


__all__ = ["Node", "NodeKind"]
