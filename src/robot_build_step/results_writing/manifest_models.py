"""Artifact manifest entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class ArtifactStatus(str, Enum):
    """Rendered status in the manifest Artifacts sheet."""

    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    workspace: Path
    test_suite_path: str
    command_line: str
    return_code: int
    transcript_path: Path
    report_file_name: str
