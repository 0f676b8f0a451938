"""Markdown pretty-printer with width-aware reflow and code formatting."""

from __future__ import annotations

__version__ = "0.1.0"

from .config import MarkerSettings, RendererConfig  # noqa: E402
from .errors import FormatError, InvariantViolation, MarkerError  # noqa: E402
from .parser import load_markdown_path, markdown_to_nodes  # noqa: E402
from .renderers import MarkdownRenderer  # noqa: E402


def format_markdown(source: str, config: RendererConfig | None = None) -> str:
    """Parse ``source`` and return its formatted rendering."""
    renderer = MarkdownRenderer(config or RendererConfig())
    return renderer.render_to_string(markdown_to_nodes(source))


__all__ = [
    "__version__",
    "FormatError",
    "InvariantViolation",
    "MarkdownRenderer",
    "MarkerError",
    "MarkerSettings",
    "RendererConfig",
    "format_markdown",
    "load_markdown_path",
    "markdown_to_nodes",
]
