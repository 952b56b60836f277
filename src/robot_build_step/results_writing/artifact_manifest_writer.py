"""Artifact manifest workbook writer service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from robot_build_step.artifact_resolution import ArtifactKind

from .manifest_models import ArtifactStatus, RunMetadata

RUN_INFO_SHEET_NAME = "RunInfo"
ARTIFACTS_SHEET_NAME = "Artifacts"
ARTIFACT_COLUMNS = ("Kind", "Status", "Path")


def write_artifact_manifest(
    output_path: Path | str,
    run_metadata: RunMetadata,
    artifacts: Mapping[ArtifactKind, Path | None],
) -> Path:
    """Write the manifest workbook for one run and return its resolved path."""
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    run_info_sheet = workbook.active
    run_info_sheet.title = RUN_INFO_SHEET_NAME
    _write_run_info(run_info_sheet, run_metadata)
    _write_artifacts(workbook.create_sheet(ARTIFACTS_SHEET_NAME), artifacts)

    workbook.save(destination)
    return destination.resolve()


def _write_run_info(sheet: Worksheet, run_metadata: RunMetadata) -> None:
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("workspace", str(run_metadata.workspace)),
        ("test_suite_path", run_metadata.test_suite_path),
        ("command_line", run_metadata.command_line),
        ("return_code", run_metadata.return_code),
        ("transcript_path", str(run_metadata.transcript_path)),
        ("report_file_name", run_metadata.report_file_name),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
    sheet.column_dimensions["A"].width = 20


def _write_artifacts(sheet: Worksheet, artifacts: Mapping[ArtifactKind, Path | None]) -> None:
    for column, header in enumerate(ARTIFACT_COLUMNS, start=1):
        sheet.cell(row=1, column=column, value=header).font = Font(bold=True)

    # Kinds that were not resolved at all are reported as not found too.
    for row, kind in enumerate(ArtifactKind, start=2):
        path = artifacts.get(kind)
        status = ArtifactStatus.FOUND if path is not None else ArtifactStatus.NOT_FOUND
        sheet.cell(row=row, column=1, value=kind.value)
        sheet.cell(row=row, column=2, value=status.value)
        sheet.cell(row=row, column=3, value=str(path) if path is not None else None)

    for column, width in enumerate((12, 12, 60), start=1):
        sheet.column_dimensions[get_column_letter(column)].width = width
