"""Pluggable formatters for fenced code blocks."""

from __future__ import annotations

from .base import CodeFormatter, CodeFormatterRegistry, FormatterRegistration
from .command import GO_LANGUAGES, CommandFormatter, gofmt_formatter
from .json_formatter import JSON_LANGUAGES, JsonFormatter


def gofmt_registration(executable: str = "gofmt") -> FormatterRegistration:
    """Register ``gofmt`` for ``go`` and ``golang`` code fences."""
    return FormatterRegistration(languages=GO_LANGUAGES, formatter=gofmt_formatter(executable))


def json_registration(indent: int = 2) -> FormatterRegistration:
    return FormatterRegistration(languages=JSON_LANGUAGES, formatter=JsonFormatter(indent=indent))


__all__ = [
    "CodeFormatter",
    "CodeFormatterRegistry",
    "CommandFormatter",
    "FormatterRegistration",
    "GO_LANGUAGES",
    "JSON_LANGUAGES",
    "JsonFormatter",
    "gofmt_formatter",
    "gofmt_registration",
    "json_registration",
]
