"""Inline node definitions."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class TextNode(Node):
    kind: NodeKind = Field(default=NodeKind.TEXT, frozen=True)
    value: str = ""
    hard_line_break: bool = False
    soft_line_break: bool = False


class StringNode(Node):
    kind: NodeKind = Field(default=NodeKind.STRING, frozen=True)
    value: str = ""


class CodeSpanNode(Node):
    kind: NodeKind = Field(default=NodeKind.CODE_SPAN, frozen=True)


class EmphasisNode(Node):
    kind: NodeKind = Field(default=NodeKind.EMPHASIS, frozen=True)
    level: int = Field(default=1, ge=1, le=2)


class LinkNode(Node):
    kind: NodeKind = Field(default=NodeKind.LINK, frozen=True)
    destination: str = ""
    title: str | None = None


class ImageNode(Node):
    kind: NodeKind = Field(default=NodeKind.IMAGE, frozen=True)
    destination: str = ""
    title: str | None = None


class AutoLinkNode(Node):
    kind: NodeKind = Field(default=NodeKind.AUTO_LINK, frozen=True)
    url: str = ""


__all__ = [
    "AutoLinkNode",
    "CodeSpanNode",
    "EmphasisNode",
    "ImageNode",
    "LinkNode",
    "StringNode",
    "TextNode",
]
