"""Prose block definitions."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class ParagraphNode(Node):
    kind: NodeKind = Field(default=NodeKind.PARAGRAPH, frozen=True)


class TextBlockNode(Node):
    """Paragraph-like text of a tight list item."""

    kind: NodeKind = Field(default=NodeKind.TEXT_BLOCK, frozen=True)


__all__ = ["ParagraphNode", "TextBlockNode"]
