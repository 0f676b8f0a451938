"""Document node definition."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class DocumentNode(Node):
    kind: NodeKind = Field(default=NodeKind.DOCUMENT, frozen=True)


__all__ = ["DocumentNode"]
