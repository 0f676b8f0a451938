"""Formatters that shell out to an external executable."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from markdown_marker.errors import FormatError

logger = logging.getLogger(__name__)

GO_LANGUAGES = frozenset({"go", "golang"})


@dataclass(slots=True, frozen=True)
class CommandFormatter:
    """Pipe code through ``command`` on stdin and read the result from stdout.

    The call blocks until the tool exits; there is no timeout. A missing
    executable or a non-zero exit status raises ``FormatError`` carrying the
    tool's stderr.
    """

    command: tuple[str, ...]
    language: str | None = None

    def format(self, code: str) -> str:
        logger.debug("Running %s on %d characters", " ".join(self.command), len(code))
        try:
            completed = subprocess.run(
                list(self.command),
                input=code,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise FormatError(
                f"could not run {self.command[0]!r}: {exc}",
                language=self.language,
                command=self.command,
            ) from exc
        if completed.returncode != 0:
            raise FormatError(
                f"{self.command[0]} exited with status {completed.returncode}",
                language=self.language,
                command=self.command,
                stderr=completed.stderr,
            )
        return completed.stdout


def gofmt_formatter(executable: str = "gofmt", args: Sequence[str] = ()) -> CommandFormatter:
    return CommandFormatter(command=(executable, *args), language="go")


__all__ = ["CommandFormatter", "GO_LANGUAGES", "gofmt_formatter"]
