"""Error types raised while rendering."""

from __future__ import annotations

from collections.abc import Sequence


class MarkerError(Exception):
    """Base exception for markdown_marker failures."""


class FormatError(MarkerError):
    """A code formatter rejected or failed to process a code block.

    Raised from ``CodeFormatter.format`` and propagated unchanged out of
    ``MarkdownRenderer.render``; the render is not resumed.
    """

    def __init__(
        self,
        message: str,
        *,
        language: str | None = None,
        command: Sequence[str] | None = None,
        stderr: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.language = language
        self.command = tuple(command) if command is not None else None
        self.stderr = stderr

    def __str__(self) -> str:
        parts = [self.message]
        if self.language:
            parts.append(f"language={self.language}")
        if self.stderr:
            parts.append(self.stderr.strip())
        return ": ".join(parts)


class InvariantViolation(MarkerError):
    """An internal precondition of the renderer does not hold.

    These indicate a malformed tree or a traversal-order bug and are not
    meant to be recovered from.
    """


__all__ = ["FormatError", "InvariantViolation", "MarkerError"]
