"""Depth-first traversal of node trees."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from markdown_marker.models.nodes import Node


class WalkStatus(str, Enum):
    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


Visitor = Callable[[Node, bool], WalkStatus]


def walk(node: Node, visitor: Visitor) -> WalkStatus:
    """Visit ``node`` and its descendants in document order.

    ``visitor`` is called with ``entering=True`` before the children and with
    ``entering=False`` after them. ``SKIP_CHILDREN`` on entry still triggers
    the exit call; ``STOP`` ends the whole traversal. Exceptions raised by the
    visitor propagate to the caller.
    """
    status = visitor(node, True)
    if status is WalkStatus.STOP:
        return WalkStatus.STOP
    if status is not WalkStatus.SKIP_CHILDREN:
        for child in node.children:
            if walk(child, visitor) is WalkStatus.STOP:
                return WalkStatus.STOP
    if visitor(node, False) is WalkStatus.STOP:
        return WalkStatus.STOP
    return WalkStatus.CONTINUE


__all__ = ["Visitor", "WalkStatus", "walk"]
