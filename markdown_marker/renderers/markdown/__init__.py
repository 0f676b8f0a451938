"""Markdown renderer package."""

from .context import RenderContext
from .reflow import reflow, split_hard_breaks
from .renderer import MarkdownRenderer
from .table import TableLayout, column_widths, compute_table_layout

__all__ = [
    "MarkdownRenderer",
    "RenderContext",
    "TableLayout",
    "column_widths",
    "compute_table_layout",
    "reflow",
    "split_hard_breaks",
]
