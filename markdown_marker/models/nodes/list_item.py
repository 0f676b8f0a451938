"""List and list item definitions."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class ListNode(Node):
    """A run of list items sharing one marker style.

    ``marker`` is the bullet character for unordered lists (``-``, ``*``,
    ``+``) and the delimiter for ordered ones (``.`` or ``)``).
    """

    kind: NodeKind = Field(default=NodeKind.LIST, frozen=True)
    ordered: bool = False
    start: int = Field(default=1, ge=0)
    marker: str = Field(default="-", min_length=1, max_length=1)
    tight: bool = True


class ListItemNode(Node):
    """One list entry; its indentation comes from the enclosing container prefixes."""

    kind: NodeKind = Field(default=NodeKind.LIST_ITEM, frozen=True)


__all__ = ["ListNode", "ListItemNode"]
