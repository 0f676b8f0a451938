"""Link reference definition node."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class LinkDefinitionNode(Node):
    """A ``[label]: destination "title"`` line that reference links resolve against."""

    kind: NodeKind = Field(default=NodeKind.LINK_DEFINITION, frozen=True)
    label: str = ""
    destination: str = ""
    title: str | None = None


__all__ = ["LinkDefinitionNode"]
