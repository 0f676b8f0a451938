"""Per-render output state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from markdown_marker.config import RendererConfig
from markdown_marker.errors import InvariantViolation

from .table import TableLayout


@dataclass(slots=True)
class RenderContext:
    """Mutable state for a single render; discarded when the walk ends.

    ``prefixes`` holds the line prefix contributed by each open container
    (``> `` for block quotes, indentation for list items). ``tables`` carries
    the layout of the table currently being rendered down to its rows and
    cells.
    """

    sink: TextIO
    config: RendererConfig
    prefixes: list[str] = field(default_factory=list)
    tables: list[TableLayout] = field(default_factory=list)
    column: int | None = None
    at_line_start: bool = True

    @property
    def line_prefix(self) -> str:
        return "".join(self.prefixes)

    def write(self, text: str) -> None:
        if not text:
            return
        self.sink.write(text)
        self.at_line_start = text.endswith("\n")

    def open_line(self) -> None:
        """Write the container prefix if nothing has been written on this line yet."""
        if self.at_line_start and self.prefixes:
            self.write(self.line_prefix)

    def write_line(self, text: str) -> None:
        self.open_line()
        self.write(text + "\n")

    def blank_line(self) -> None:
        if not self.at_line_start:
            self.write("\n")
        self.write(self.line_prefix.rstrip() + "\n")

    def reflow_width(self) -> int:
        return max(1, self.config.max_width - len(self.line_prefix))

    # Tables -----------------------------------------------------------
    def current_table(self) -> TableLayout:
        if not self.tables:
            raise InvariantViolation("table row rendered without a computed table layout")
        return self.tables[-1]

    def start_row(self) -> TableLayout:
        layout = self.current_table()
        self.column = 0
        return layout

    def end_row(self) -> None:
        self.column = None

    def next_column_width(self) -> int:
        layout = self.current_table()
        if self.column is None:
            raise InvariantViolation("table cell rendered outside of a table row")
        width = layout.width_of(self.column)
        self.column += 1
        return width


__all__ = ["RenderContext"]
