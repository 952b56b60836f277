"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "robot-step.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Run configuration template for robot-build-step.
# Replace the <REQUIRED> placeholder before running command or run.
# Remove <OPTIONAL> entries your run does not need.

# Test case file or directory handed to pybot.
test_suite_path: "<REQUIRED>"
# Directory for report.html, log.html and output.xml.
# output_directory: "<OPTIONAL>"

# Comma-separated lists (or YAML lists), one pybot option per entry.
# tags_to_set: "<OPTIONAL>"        # --settag
# tests_by_name: "<OPTIONAL>"      # --test
# tests_by_tag: "<OPTIONAL>"       # --include
# excluded_tags: "<OPTIONAL>"      # --exclude
# non_critical_tags: "<OPTIONAL>"  # --noncritical

# variable_file: "<OPTIONAL>"
# argument_file: "<OPTIONAL>"

# Presence of a block enables the extra output file.
# save_summary:
#   summary_file: "<OPTIONAL>"
# save_debug:
#   debug_file: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML run configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder run configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Run configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
