"""Code formatter protocol and language registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


@runtime_checkable
class CodeFormatter(Protocol):
    def format(self, code: str) -> str:
        """Return a formatted equivalent of ``code``.

        Raises ``FormatError`` when the code is malformed or the underlying
        tool fails.
        """
        ...


class FormatterRegistration(BaseModel):
    """A formatter together with the language tags it claims."""

    languages: frozenset[str] = Field(min_length=1)
    formatter: Any

    model_config = ConfigDict(frozen=True)

    @field_validator("formatter")
    @classmethod
    def _check_formatter(cls, value: Any) -> Any:
        if not isinstance(value, CodeFormatter):
            raise ValueError(f"{value!r} does not provide a format(code) method")
        return value


@dataclass(slots=True)
class CodeFormatterRegistry:
    """Maps fenced-code language tags (case-sensitive) to formatters."""

    _formatters: dict[str, CodeFormatter] = field(default_factory=dict)

    @classmethod
    def from_registrations(cls, registrations: Iterable[FormatterRegistration]) -> CodeFormatterRegistry:
        registry = cls()
        for registration in registrations:
            registry.register(sorted(registration.languages), registration.formatter)
        return registry

    def register(self, languages: Iterable[str], formatter: CodeFormatter) -> None:
        """Claim ``languages`` for ``formatter``; later registrations win."""
        for language in languages:
            previous = self._formatters.get(language)
            if previous is not None and previous is not formatter:
                logger.debug("Formatter %r replaces %r for language %r", formatter, previous, language)
            self._formatters[language] = formatter

    def lookup(self, language: str | None) -> CodeFormatter | None:
        if not language:
            return None
        return self._formatters.get(language)

    def languages(self) -> list[str]:
        return sorted(self._formatters)

    def __contains__(self, language: object) -> bool:
        return language in self._formatters

    def __iter__(self) -> Iterator[str]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)


__all__ = ["CodeFormatter", "CodeFormatterRegistry", "FormatterRegistration"]
