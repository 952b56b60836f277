"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from robot_build_step.configuration.loader import load_run_configuration
from robot_build_step.configuration.runtime_settings import (
    ConfigurationError,
    InvalidConfiguration,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "robot-step.yaml",
        """
test_suite_path: "  suites/login.txt  "
""",
    )

    configuration = load_run_configuration(config_path)

    assert configuration.test_suite_path == "suites/login.txt"
    assert configuration.output_directory is None
    assert configuration.tags_to_set == ""
    assert configuration.tests_by_tag == ""
    assert configuration.variable_file is None
    assert configuration.argument_file is None
    assert configuration.save_summary is False
    assert configuration.save_debug is False


def test_loads_yaml_configuration_with_every_setting(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "robot-step.yaml",
        """
test_suite_path: suites
output_directory: results
tags_to_set: "nightly, ci"
tests_by_name: "Valid Login"
tests_by_tag:
  - smoke
  - regress
excluded_tags: wip
non_critical_tags: flaky
variable_file: vars/env.py
argument_file: args.txt
save_summary:
  summary_file: summary.html
save_debug:
  debug_file: " debug.txt "
""",
    )

    configuration = load_run_configuration(config_path)

    assert configuration.output_directory == "results"
    assert configuration.tags_to_set == "nightly, ci"
    assert configuration.tests_by_name == "Valid Login"
    assert configuration.tests_by_tag == "smoke,regress"
    assert configuration.excluded_tags == "wip"
    assert configuration.non_critical_tags == "flaky"
    assert configuration.variable_file == "vars/env.py"
    assert configuration.argument_file == "args.txt"
    assert configuration.summary_file == "summary.html"
    assert configuration.save_summary is True
    assert configuration.debug_file == "debug.txt"
    assert configuration.save_debug is True


def test_loads_json_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "robot-step.json",
        json.dumps({"test_suite_path": "/suite", "output_directory": "/out"}),
    )

    configuration = load_run_configuration(config_path)

    assert configuration.test_suite_path == "/suite"
    assert configuration.output_directory == "/out"


def test_save_summary_block_without_file_name_leaves_summary_disabled(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "robot-step.yaml",
        """
test_suite_path: suites
save_summary: {}
save_debug:
  debug_file: "   "
""",
    )

    configuration = load_run_configuration(config_path)

    assert configuration.summary_file is None
    assert configuration.save_summary is False
    assert configuration.debug_file is None
    assert configuration.save_debug is False


def test_errors_when_configuration_file_is_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_run_configuration(tmp_path / "missing.yaml")


def test_errors_when_configuration_path_is_a_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Failed to read configuration file"):
        load_run_configuration(tmp_path)


def test_errors_when_configuration_file_is_not_utf8(tmp_path: Path) -> None:
    config_path = tmp_path / "robot-step.yaml"
    config_path.write_bytes(b"test_suite_path: \xff\xfe\n")

    with pytest.raises(ConfigurationError, match="Failed to read configuration file"):
        load_run_configuration(config_path)


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "robot-step.yaml", "- suites\n")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_run_configuration(config_path)


def test_errors_when_yaml_cannot_be_parsed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "robot-step.yaml", "test_suite_path: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_run_configuration(config_path)


@pytest.mark.parametrize("contents", ["", "output_directory: out\n", "test_suite_path: '  '\n"])
def test_errors_when_test_suite_path_missing_or_blank(tmp_path: Path, contents: str) -> None:
    config_path = _write_file(tmp_path / "robot-step.yaml", contents)

    with pytest.raises(InvalidConfiguration, match="test_suite_path"):
        load_run_configuration(config_path)


def test_errors_when_save_summary_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "robot-step.yaml",
        "test_suite_path: suites\nsave_summary: summary.html\n",
    )

    with pytest.raises(InvalidConfiguration, match="save_summary must be a mapping"):
        load_run_configuration(config_path)


def test_errors_when_tag_list_contains_non_string(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "robot-step.yaml",
        "test_suite_path: suites\nexcluded_tags:\n  - wip\n  - 3\n",
    )

    with pytest.raises(InvalidConfiguration, match="excluded_tags entries must be strings"):
        load_run_configuration(config_path)
