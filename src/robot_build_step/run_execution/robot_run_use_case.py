"""Run execution use-case service."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path
from typing import TextIO

from robot_build_step.artifact_resolution import (
    LogArtifactResolver,
    TranscriptUnavailable,
    read_transcript,
)
from robot_build_step.command_assembly import assemble_command_line
from robot_build_step.configuration import ConfigurationError, load_run_configuration
from robot_build_step.results_writing import RunMetadata, write_artifact_manifest

from .run_contracts import RunOutcome, RunRequest

ProcessRunner = Callable[[tuple[str, ...], Path, TextIO], int]

DEFAULT_TRANSCRIPT_FILENAME = "console.log"

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_robot_run(
    request: RunRequest,
    *,
    run_process: ProcessRunner | None = None,
    resolver: LogArtifactResolver | None = None,
) -> RunOutcome:
    """Run pybot for one configuration and collect the artifacts it announced."""
    resolved_run_process = run_process or run_subprocess
    resolved_resolver = resolver or LogArtifactResolver()

    try:
        configuration = load_run_configuration(request.config_path)
        command_line = assemble_command_line(configuration)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc

    workspace = Path(request.workspace).resolve()
    transcript_path = _resolve_transcript_path(workspace, request.transcript_path)
    run_start = datetime.now(UTC)
    return_code = _run_with_transcript(
        command_line, workspace, transcript_path, resolved_run_process
    )
    _LOGGER.debug("pybot exited with code %s", return_code)

    try:
        transcript = read_transcript(transcript_path, working_directory=workspace)
    except TranscriptUnavailable as exc:
        raise RunExecutionError(str(exc)) from exc
    artifacts = resolved_resolver.resolve_all(transcript)

    outcome = RunOutcome(
        command_line=command_line,
        return_code=return_code,
        transcript_path=transcript_path,
        artifacts=artifacts,
    )
    manifest_path = _resolve_manifest_path(
        configuration.test_suite_path, request.output_dir, workspace, run_start
    )
    run_metadata = RunMetadata(
        run_start=run_start,
        workspace=workspace,
        test_suite_path=configuration.test_suite_path,
        command_line=shlex.join(command_line),
        return_code=return_code,
        transcript_path=transcript_path,
        report_file_name=outcome.report_file_name,
    )
    try:
        written_manifest = write_artifact_manifest(manifest_path, run_metadata, artifacts)
    except OSError as exc:
        raise RunExecutionError(f"Failed to write artifact manifest: {exc}") from exc
    return replace(outcome, manifest_path=written_manifest)


def run_subprocess(command: tuple[str, ...], cwd: Path, transcript: TextIO) -> int:
    """Run one command with stdout and stderr written to the transcript."""
    completed = subprocess.run(
        list(command),
        cwd=cwd,
        stdout=transcript,
        stderr=subprocess.STDOUT,
        check=False,
    )
    return completed.returncode


def _run_with_transcript(
    command_line: tuple[str, ...],
    workspace: Path,
    transcript_path: Path,
    run_process: ProcessRunner,
) -> int:
    command_text = shlex.join(command_line)
    try:
        transcript_path.parent.mkdir(parents=True, exist_ok=True)
        # One run per transcript; announcements of an earlier run must not survive.
        with transcript_path.open("w", encoding="utf-8") as transcript:
            transcript.write(f"[{workspace.name}] $ {command_text}\n")
            transcript.flush()
            return run_process(command_line, workspace, transcript)
    except FileNotFoundError as exc:
        raise RunExecutionError(f"Command not found: {command_text}") from exc
    except OSError as exc:
        raise RunExecutionError(f"Failed to run command {command_text}: {exc}") from exc


def _resolve_transcript_path(workspace: Path, transcript_path: str | None) -> Path:
    if transcript_path:
        return Path(transcript_path).resolve()
    return workspace / DEFAULT_TRANSCRIPT_FILENAME


def _resolve_manifest_path(
    test_suite_path: str, output_dir: str | None, workspace: Path, run_start: datetime
) -> Path:
    destination = Path(output_dir) if output_dir else workspace
    suite_stem = Path(test_suite_path).stem or "suite"
    timestamp = run_start.strftime("%Y%m%d-%H%M%S")
    return destination / f"{suite_stem}-artifacts-{timestamp}.xlsx"
