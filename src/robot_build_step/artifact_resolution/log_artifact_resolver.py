"""Recover artifact paths announced by pybot from a console transcript."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from robot_build_step.constants import ROBOT_EXECUTABLE

from .artifact_kinds import ArtifactKind
from .console_transcript import ConsoleTranscript, read_transcript

_LOGGER = logging.getLogger(__name__)


class LogArtifactResolver:
    """Find the most recent artifact announcement of a kind in a console transcript.

    The transcript is the only source of truth. A configured file name may be
    relative, while pybot announces the path it actually wrote. A missing
    result is returned as `None` and never raised.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        execution_marker: str = ROBOT_EXECUTABLE,
    ) -> None:
        self._logger = logger or _LOGGER
        self._execution_marker = execution_marker

    def resolve(self, transcript: ConsoleTranscript, kind: ArtifactKind) -> Path | None:
        """Return the existing file last announced for `kind`, or `None`."""
        if not transcript.mentions(self._execution_marker):
            self._logger.info(
                "%s was not executed for console log: %s",
                self._execution_marker,
                transcript.source or "<memory>",
            )
            return None

        candidate = self._last_announced_path(transcript, kind)
        if candidate is None:
            self._logger.debug("No %s announcement found in console log.", kind.value)
            return None

        path = Path(candidate)
        if not path.is_absolute() and transcript.working_directory is not None:
            path = transcript.working_directory / path
        if not path.is_file():
            self._logger.debug("Announced %s file does not exist: %s", kind.value, candidate)
            return None
        return path

    def resolve_all(
        self,
        transcript: ConsoleTranscript,
        kinds: Iterable[ArtifactKind] | None = None,
    ) -> dict[ArtifactKind, Path | None]:
        """Resolve several kinds against one transcript, all kinds by default."""
        selected = ArtifactKind if kinds is None else kinds
        return {kind: self.resolve(transcript, kind) for kind in selected}

    def resolve_from_log(
        self,
        log_path: Path | str,
        kind: ArtifactKind,
        working_directory: Path | str | None = None,
    ) -> Path | None:
        """Read a console log file and resolve `kind` from it.

        Relative announcements are looked up under `working_directory` when given,
        else under the current directory.

        Raises:
          TranscriptUnavailable: If the console log cannot be read.
        """
        return self.resolve(read_transcript(log_path, working_directory), kind)

    @staticmethod
    def _last_announced_path(transcript: ConsoleTranscript, kind: ArtifactKind) -> str | None:
        pattern = kind.announcement_pattern()
        for line in reversed(transcript.lines):
            stripped = line.strip()
            match = pattern.search(stripped)
            if match:
                return stripped[match.end("prefix") :].strip()
        return None


_DEFAULT_RESOLVER = LogArtifactResolver()


def resolve_artifact(transcript: ConsoleTranscript, kind: ArtifactKind) -> Path | None:
    """Resolve `kind` with a resolver that logs to this module's logger."""
    return _DEFAULT_RESOLVER.resolve(transcript, kind)
