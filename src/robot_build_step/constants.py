"""Constants shared by command assembly and artifact resolution."""

from __future__ import annotations

# Executable of the Robot Framework runner. Its name in a console transcript
# marks the transcript as containing a runner invocation.
ROBOT_EXECUTABLE = "pybot"

DEFAULT_REPORT_FILE = "report.html"
