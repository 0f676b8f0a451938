"""Thematic break node definition."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class ThematicBreakNode(Node):
    kind: NodeKind = Field(default=NodeKind.THEMATIC_BREAK, frozen=True)


__all__ = ["ThematicBreakNode"]
