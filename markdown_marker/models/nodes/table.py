"""Table node definitions."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class TableNode(Node):
    """Pipe table; the first child is the header, the rest are body rows."""

    kind: NodeKind = Field(default=NodeKind.TABLE, frozen=True)


class TableHeaderNode(Node):
    kind: NodeKind = Field(default=NodeKind.TABLE_HEADER, frozen=True)


class TableRowNode(Node):
    kind: NodeKind = Field(default=NodeKind.TABLE_ROW, frozen=True)


class TableCellNode(Node):
    kind: NodeKind = Field(default=NodeKind.TABLE_CELL, frozen=True)
    align: str | None = None

    @property
    def width(self) -> int:
        return sum(len(line) for line in self.lines)


__all__ = ["TableNode", "TableHeaderNode", "TableRowNode", "TableCellNode"]
