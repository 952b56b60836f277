"""Run configuration entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


class InvalidConfiguration(ConfigurationError):
    """Raised when a run configuration misses a required field or holds a bad value."""


@dataclass(frozen=True)
class RunConfiguration:  # pylint: disable=too-many-instance-attributes
    """Normalized settings for one Robot Framework run.

    Build instances with `build_run_configuration`, which trims every value and
    stores absent optional values as `None`.
    """

    test_suite_path: str
    output_directory: str | None = None
    tags_to_set: str = ""
    tests_by_name: str = ""
    tests_by_tag: str = ""
    excluded_tags: str = ""
    non_critical_tags: str = ""
    variable_file: str | None = None
    argument_file: str | None = None
    summary_file: str | None = None
    debug_file: str | None = None

    @property
    def save_summary(self) -> bool:
        return self.summary_file is not None

    @property
    def save_debug(self) -> bool:
        return self.debug_file is not None


# pylint: disable=too-many-arguments
def build_run_configuration(
    test_suite_path: Any,
    *,
    output_directory: Any = None,
    tags_to_set: Any = None,
    tests_by_name: Any = None,
    tests_by_tag: Any = None,
    excluded_tags: Any = None,
    non_critical_tags: Any = None,
    variable_file: Any = None,
    argument_file: Any = None,
    summary_file: Any = None,
    debug_file: Any = None,
) -> RunConfiguration:
    """Validate raw values and return a normalized run configuration.

    Raises:
      InvalidConfiguration: If the test suite path is missing or blank, or a
        value is not a string.
    """
    return RunConfiguration(
        test_suite_path=require_test_suite_path(test_suite_path),
        output_directory=_optional_string(output_directory, "output_directory"),
        tags_to_set=_token_list(tags_to_set, "tags_to_set"),
        tests_by_name=_token_list(tests_by_name, "tests_by_name"),
        tests_by_tag=_token_list(tests_by_tag, "tests_by_tag"),
        excluded_tags=_token_list(excluded_tags, "excluded_tags"),
        non_critical_tags=_token_list(non_critical_tags, "non_critical_tags"),
        variable_file=_optional_string(variable_file, "variable_file"),
        argument_file=_optional_string(argument_file, "argument_file"),
        summary_file=_optional_string(summary_file, "summary_file"),
        debug_file=_optional_string(debug_file, "debug_file"),
    )


# pylint: enable=too-many-arguments


def require_test_suite_path(value: Any) -> str:
    """Return the trimmed test suite path or raise `InvalidConfiguration`."""
    if value is None:
        raise InvalidConfiguration("test_suite_path is required.")
    if not isinstance(value, str):
        raise InvalidConfiguration("test_suite_path must be a string.")
    stripped = value.strip()
    if not stripped:
        raise InvalidConfiguration("test_suite_path must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidConfiguration(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _token_list(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidConfiguration(f"{field_name} must be a comma-separated string.")
    return value.strip()
