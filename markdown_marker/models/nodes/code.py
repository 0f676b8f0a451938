"""Code block definitions."""

from __future__ import annotations

from pydantic import Field

from .base import Node, NodeKind


class CodeBlockNode(Node):
    """Indented code block; ``lines`` are stored without the indentation."""

    kind: NodeKind = Field(default=NodeKind.CODE_BLOCK, frozen=True)


class FencedCodeBlockNode(Node):
    kind: NodeKind = Field(default=NodeKind.FENCED_CODE_BLOCK, frozen=True)
    info: str | None = None

    @property
    def language(self) -> str | None:
        """First word of the info string, e.g. ``go`` for ```` ```go title=x ````."""
        if not self.info:
            return None
        words = self.info.split()
        return words[0] if words else None


__all__ = ["CodeBlockNode", "FencedCodeBlockNode"]
