"""Renderer configuration and environment-backed settings."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from markdown_marker.formatters.base import FormatterRegistration
from markdown_marker.models.nodes import NodeKind

DEFAULT_MAX_WIDTH = 80


class Decoration(BaseModel):
    """Prefix/suffix pair wrapped around a node's rendered content."""

    prefix: str = ""
    suffix: str = ""

    model_config = ConfigDict(frozen=True)


class HardBreakPolicy(str, Enum):
    """What a hard line break inside a paragraph turns into.

    ``PRESERVE`` ends the reflowed line at the break and marks it with a
    trailing backslash; ``COLLAPSE`` treats the break as word spacing.
    """

    PRESERVE = "preserve"
    COLLAPSE = "collapse"


class ListNumbering(str, Enum):
    """How ordered list items are numbered.

    ``INCREMENT`` counts up from the list's start number; ``REPEAT`` prints
    the start number on every item.
    """

    INCREMENT = "increment"
    REPEAT = "repeat"


def default_decorations() -> dict[NodeKind, Decoration]:
    return {
        NodeKind.EMPHASIS: Decoration(prefix="*", suffix="*"),
        NodeKind.CODE_SPAN: Decoration(prefix="`", suffix="`"),
        NodeKind.BLOCKQUOTE: Decoration(prefix="> "),
    }


class RendererConfig(BaseModel):
    """Immutable settings for one ``MarkdownRenderer``.

    Emphasis decorations are repeated once per emphasis level, so the
    default ``*`` renders strong emphasis as ``**``.
    """

    max_width: PositiveInt = DEFAULT_MAX_WIDTH
    decorations: dict[NodeKind, Decoration] = Field(default_factory=default_decorations)
    hard_breaks: HardBreakPolicy = HardBreakPolicy.PRESERVE
    list_numbering: ListNumbering = ListNumbering.INCREMENT
    formatters: tuple[FormatterRegistration, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def decoration_for(self, kind: NodeKind) -> Decoration:
        return self.decorations.get(kind, Decoration())


class MarkerSettings(BaseSettings):
    """Command-line defaults, overridable with ``MARKER_*`` environment variables."""

    max_width: PositiveInt = DEFAULT_MAX_WIDTH
    log_level: str = "WARNING"
    gofmt: bool = False
    gofmt_executable: str = "gofmt"
    format_json: bool = False
    hard_breaks: HardBreakPolicy = HardBreakPolicy.PRESERVE
    list_numbering: ListNumbering = ListNumbering.INCREMENT

    model_config = SettingsConfigDict(env_prefix="MARKER_")


__all__ = [
    "DEFAULT_MAX_WIDTH",
    "Decoration",
    "HardBreakPolicy",
    "ListNumbering",
    "MarkerSettings",
    "RendererConfig",
    "default_decorations",
]
