"""Render a run configuration into the pybot argument list."""

from __future__ import annotations

from robot_build_step.configuration.runtime_settings import (
    RunConfiguration,
    require_test_suite_path,
)
from robot_build_step.constants import ROBOT_EXECUTABLE

from .token_lists import prefixed_tokens

CommandLine = tuple[str, ...]


def assemble_command_line(config: RunConfiguration) -> CommandLine:
    """Return the pybot command line for one run.

    Options come in a fixed order because pybot lets later occurrences of
    repeatable options override or accumulate. The suite path is always last.
    Tokens are not shell-quoted.

    Raises:
      InvalidConfiguration: If the test suite path is blank.
    """
    test_suite_path = require_test_suite_path(config.test_suite_path)
    tokens: list[str] = [ROBOT_EXECUTABLE]

    if config.output_directory:
        tokens.append(f"--outputdir={config.output_directory}")
    if config.save_summary and config.summary_file:
        tokens.append(f"--summary={config.summary_file}")
    if config.save_debug and config.debug_file:
        tokens.append(f"--debugfile={config.debug_file}")

    for value, prefix in (
        (config.tags_to_set, "--settag="),
        (config.tests_by_name, "--test="),
        (config.tests_by_tag, "--include="),
        (config.excluded_tags, "--exclude="),
        (config.non_critical_tags, "--noncritical="),
        (config.variable_file, "--variablefile="),
    ):
        tokens.extend(prefixed_tokens(value, prefix))

    if config.argument_file:
        tokens.append(f"--argumentfile={config.argument_file}")

    tokens.append(test_suite_path)
    return tuple(tokens)
