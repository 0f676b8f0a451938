"""JSON code formatter."""

from __future__ import annotations

import json
from dataclasses import dataclass

from markdown_marker.errors import FormatError

JSON_LANGUAGES = frozenset({"json"})


@dataclass(slots=True, frozen=True)
class JsonFormatter:
    indent: int = 2
    sort_keys: bool = False

    def format(self, code: str) -> str:
        try:
            payload = json.loads(code)
        except json.JSONDecodeError as exc:
            raise FormatError(f"invalid JSON: {exc}", language="json") from exc
        return json.dumps(payload, indent=self.indent, sort_keys=self.sort_keys, ensure_ascii=False) + "\n"


__all__ = ["JSON_LANGUAGES", "JsonFormatter"]
