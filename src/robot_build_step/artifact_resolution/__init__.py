"""Artifact resolution exports."""

from .artifact_kinds import PATH_START_PATTERN, ArtifactKind
from .console_transcript import (
    ConsoleTranscript,
    TranscriptUnavailable,
    read_transcript,
    split_console_lines,
)
from .log_artifact_resolver import LogArtifactResolver, resolve_artifact

__all__ = [
    "ArtifactKind",
    "PATH_START_PATTERN",
    "ConsoleTranscript",
    "TranscriptUnavailable",
    "read_transcript",
    "split_console_lines",
    "LogArtifactResolver",
    "resolve_artifact",
]
