"""Artifact kinds announced by pybot at the end of a run."""

from __future__ import annotations

import re
from enum import Enum

# Start of an absolute or relative path: "..", "/", "X:\" or "\\".
PATH_START_PATTERN = r"(?:\.{2}|/|[a-zA-Z]:\\|\\{2})"


class ArtifactKind(str, Enum):
    """Output file category together with its console announcement prefix."""

    REPORT = "report"
    OUTPUT = "output"
    LOG = "log"
    SUMMARY = "summary"
    DEBUG = "debug"

    @property
    def prefix_pattern(self) -> str:
        return _PREFIX_PATTERNS[self]

    def announcement_pattern(self) -> re.Pattern[str]:
        """Compiled pattern for a full announcement line, prefix in group `prefix`."""
        return _ANNOUNCEMENT_PATTERNS[self]


_PREFIX_PATTERNS = {
    ArtifactKind.DEBUG: r"^Debug:\s+",
    ArtifactKind.OUTPUT: r"^Output:\s+",
    # pybot may print the summary line behind other text.
    ArtifactKind.SUMMARY: r"Summary:\s+",
    ArtifactKind.REPORT: r"^Report:\s+",
    ArtifactKind.LOG: r"^Log:\s+",
}

_ANNOUNCEMENT_PATTERNS = {
    kind: re.compile(f"(?P<prefix>{prefix}){PATH_START_PATTERN}.+$")
    for kind, prefix in _PREFIX_PATTERNS.items()
}
