"""Renderer interfaces."""

from __future__ import annotations

from typing import Protocol, TextIO

from markdown_marker.models.nodes import Node


class Renderer(Protocol):
    def render(self, document: Node, sink: TextIO) -> None:
        ...

    def render_to_string(self, document: Node) -> str:
        ...


__all__ = ["Renderer"]
