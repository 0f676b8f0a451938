"""HTML node definitions."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class HTMLBlockNode(Node):
    kind: NodeKind = Field(default=NodeKind.HTML_BLOCK, frozen=True)


class RawHTMLNode(Node):
    kind: NodeKind = Field(default=NodeKind.RAW_HTML, frozen=True)
    value: str = ""


__all__ = ["HTMLBlockNode", "RawHTMLNode"]
