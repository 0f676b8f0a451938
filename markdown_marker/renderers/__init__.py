"""Renderer implementations and helpers."""

from .base import Renderer
from .markdown import MarkdownRenderer

__all__ = ["Renderer", "MarkdownRenderer"]
