"""Block quote node definition."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class BlockquoteNode(Node):
    kind: NodeKind = Field(default=NodeKind.BLOCKQUOTE, frozen=True)


__all__ = ["BlockquoteNode"]
