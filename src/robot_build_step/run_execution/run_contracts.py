"""Run execution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from robot_build_step.artifact_resolution import ArtifactKind
from robot_build_step.constants import DEFAULT_REPORT_FILE


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    config_path: str
    workspace: str = "."
    transcript_path: str | None = None
    output_dir: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    command_line: tuple[str, ...]
    return_code: int
    transcript_path: Path
    artifacts: Mapping[ArtifactKind, Path | None] = field(default_factory=dict)
    manifest_path: Path | None = None

    @property
    def report_file_name(self) -> str:
        """Name of the resolved html report, falling back to pybot's default name."""
        report = self.artifacts.get(ArtifactKind.REPORT)
        return report.name if report is not None else DEFAULT_REPORT_FILE

    def artifact(self, kind: ArtifactKind) -> Path | None:
        return self.artifacts.get(kind)
