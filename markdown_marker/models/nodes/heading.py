"""Heading node definition."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class HeadingNode(Node):
    kind: NodeKind = Field(default=NodeKind.HEADING, frozen=True)
    level: int = Field(default=1, ge=1, le=6)


__all__ = ["HeadingNode"]
