"""Column width computation for pipe tables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from markdown_marker.errors import InvariantViolation
from markdown_marker.models.nodes import Node, NodeKind, TableCellNode


@dataclass(slots=True, frozen=True)
class TableLayout:
    column_widths: tuple[int, ...]

    def width_of(self, column: int) -> int:
        if column >= len(self.column_widths):
            raise InvariantViolation(
                f"table cell in column {column} but layout has {len(self.column_widths)} columns"
            )
        return self.column_widths[column]

    def separator(self) -> str:
        return "".join("|" + "-" * (width + 2) for width in self.column_widths) + "|"


def column_widths(rows: Sequence[Sequence[int]]) -> tuple[int, ...]:
    """Return the per-column maximum of ``rows`` (cell content lengths).

    The first row fixes the column count; every other row must match it.
    """
    if not rows:
        return ()
    widths = list(rows[0])
    for index, row in enumerate(rows[1:], start=1):
        if len(row) != len(widths):
            raise InvariantViolation(
                f"table row {index} has {len(row)} cells, expected {len(widths)}"
            )
        for column, width in enumerate(row):
            if width > widths[column]:
                widths[column] = width
    return tuple(widths)


def compute_table_layout(table: Node) -> TableLayout:
    if table.kind is not NodeKind.TABLE:
        raise InvariantViolation(f"expected a table node, got {table.kind.value}")
    rows: list[list[int]] = []
    for row in table.children:
        lengths = []
        for cell in row.children:
            if not isinstance(cell, TableCellNode):
                raise InvariantViolation(f"table row contains a {cell.kind.value} node")
            lengths.append(cell.width)
        rows.append(lengths)
    return TableLayout(column_widths=column_widths(rows))


__all__ = ["TableLayout", "column_widths", "compute_table_layout"]
