"""Tests for run execution domain entities."""

from __future__ import annotations

from pathlib import Path

from robot_build_step.artifact_resolution import ArtifactKind
from robot_build_step.run_execution.run_contracts import RunOutcome, RunRequest


def test_run_request_defaults_to_current_workspace() -> None:
    request = RunRequest(config_path="robot-step.yaml")

    assert request.workspace == "."
    assert request.transcript_path is None
    assert request.output_dir is None


def test_report_file_name_uses_resolved_report() -> None:
    outcome = RunOutcome(
        command_line=("pybot", "/suite"),
        return_code=0,
        transcript_path=Path("/tmp/console.log"),
        artifacts={ArtifactKind.REPORT: Path("/tmp/results/custom-report.html")},
    )

    assert outcome.report_file_name == "custom-report.html"
    assert outcome.artifact(ArtifactKind.REPORT) == Path("/tmp/results/custom-report.html")


def test_report_file_name_falls_back_to_default_name() -> None:
    outcome = RunOutcome(
        command_line=("pybot", "/suite"),
        return_code=252,
        transcript_path=Path("/tmp/console.log"),
        artifacts={ArtifactKind.REPORT: None},
    )

    assert outcome.report_file_name == "report.html"
    assert outcome.artifact(ArtifactKind.LOG) is None
    assert outcome.manifest_path is None
