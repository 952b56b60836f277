"""Run execution domain exports."""

from .robot_run_use_case import (
    DEFAULT_TRANSCRIPT_FILENAME,
    ProcessRunner,
    RunExecutionError,
    execute_robot_run,
    run_subprocess,
)
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "ProcessRunner",
    "DEFAULT_TRANSCRIPT_FILENAME",
    "execute_robot_run",
    "run_subprocess",
]
