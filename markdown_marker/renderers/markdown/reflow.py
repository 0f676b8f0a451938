"""Greedy line reflow for paragraph text."""

from __future__ import annotations

import re
from collections.abc import Sequence

_WORD_RE = re.compile(r"\S+")
_HARD_BREAK_RE = re.compile(r"(?: {2,}|(?<!\\)\\)$")


def reflow(text: str, max_width: int) -> list[str]:
    """Re-wrap ``text`` into lines narrower than ``max_width``.

    Original line breaks and whitespace runs collapse to single spaces. Words
    are added to the current line while the line stays strictly shorter than
    ``max_width``; the next word then starts a new line. A word that is wider
    than ``max_width`` on its own is kept whole on its own line.

    >>> reflow("a b c defg i jk", 10)
    ['a b c', 'defg i jk']
    """
    if max_width < 1:
        raise ValueError(f"max_width must be positive, got {max_width}")

    lines: list[str] = []
    current: list[str] = []
    length = 0
    for match in _WORD_RE.finditer(text):
        word = match.group(0)
        if current and length + 1 + len(word) >= max_width:
            lines.append(" ".join(current))
            current = []
            length = 0
        if current:
            length += 1
        current.append(word)
        length += len(word)
    if current:
        lines.append(" ".join(current))
    return lines


def split_hard_breaks(lines: Sequence[str]) -> list[str]:
    """Split source lines into runs separated by hard line breaks.

    A hard break is a line ending in two or more spaces or in a single
    backslash, followed by another line. The break marker is removed from the
    returned runs; a marker on the final line is kept as text.
    """
    source = "".join(lines).splitlines()
    runs: list[str] = []
    current: list[str] = []
    for index, line in enumerate(source):
        match = _HARD_BREAK_RE.search(line)
        if match and index < len(source) - 1:
            current.append(line[: match.start()])
            runs.append(" ".join(current))
            current = []
        else:
            current.append(line)
    if current:
        runs.append(" ".join(current))
    return runs


__all__ = ["reflow", "split_hard_breaks"]
