"""Console transcript entities and reader."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

# Line endings a console log reader honours; form feeds and other separators stay in the line.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class TranscriptUnavailable(Exception):
    """Raised when a console transcript cannot be read."""


@dataclass(frozen=True)
class ConsoleTranscript:
    """Captured console lines of one finished build step.

    `working_directory` is the directory the runner was started in; relative
    paths announced in the transcript are relative to it.
    """

    lines: tuple[str, ...]
    source: Path | None = None
    working_directory: Path | None = None

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        source: Path | None = None,
        working_directory: Path | None = None,
    ) -> ConsoleTranscript:
        return cls(
            lines=tuple(line.rstrip("\r\n") for line in lines),
            source=source,
            working_directory=working_directory,
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        source: Path | None = None,
        working_directory: Path | None = None,
    ) -> ConsoleTranscript:
        return cls(
            lines=split_console_lines(text),
            source=source,
            working_directory=working_directory,
        )

    def mentions(self, literal: str) -> bool:
        return any(literal in line for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def split_console_lines(text: str) -> tuple[str, ...]:
    """Split on `\\r\\n`, `\\r` and `\\n` only; a trailing line ending adds no empty line."""
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


def read_transcript(
    path: Path | str, working_directory: Path | str | None = None
) -> ConsoleTranscript:
    """Read a console log file into an immutable transcript.

    Raises:
      TranscriptUnavailable: If the file is missing, not a regular file, or unreadable.
    """
    transcript_path = Path(path).absolute()
    if not transcript_path.is_file():
        raise TranscriptUnavailable(f"Console log not found: {transcript_path}")
    try:
        # newline="" keeps "\r" so that line splitting stays in one place.
        with transcript_path.open(encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise TranscriptUnavailable(
            f"Failed to read console log {transcript_path}: {exc}"
        ) from exc
    return ConsoleTranscript.from_text(
        text,
        source=transcript_path,
        working_directory=Path(working_directory).absolute() if working_directory else None,
    )
