"""Results writing domain exports."""

from .artifact_manifest_writer import (
    ARTIFACTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_artifact_manifest,
)
from .manifest_models import ArtifactStatus, RunMetadata

__all__ = [
    "ArtifactStatus",
    "RunMetadata",
    "ARTIFACTS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "write_artifact_manifest",
]
