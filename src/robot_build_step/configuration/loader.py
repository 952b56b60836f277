"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    ConfigurationError,
    InvalidConfiguration,
    RunConfiguration,
    build_run_configuration,
)

_TOKEN_LIST_FIELDS = (
    "tags_to_set",
    "tests_by_name",
    "tests_by_tag",
    "excluded_tags",
    "non_critical_tags",
)


def load_run_configuration(config_path: Path | str) -> RunConfiguration:
    """Load and validate a YAML or JSON run configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return parse_run_configuration(parsed)


def parse_run_configuration(section: Mapping[str, Any]) -> RunConfiguration:
    """Build a run configuration from an already parsed mapping."""
    token_lists = {
        field_name: _join_token_sequence(section.get(field_name), field_name)
        for field_name in _TOKEN_LIST_FIELDS
    }
    return build_run_configuration(
        section.get("test_suite_path"),
        output_directory=section.get("output_directory"),
        variable_file=section.get("variable_file"),
        argument_file=section.get("argument_file"),
        summary_file=_optional_block_value(section, "save_summary", "summary_file"),
        debug_file=_optional_block_value(section, "save_debug", "debug_file"),
        **token_lists,
    )


def _optional_block_value(section: Mapping[str, Any], block_name: str, key: str) -> Any:
    block = section.get(block_name)
    if block is None:
        return None
    if not isinstance(block, Mapping):
        raise InvalidConfiguration(f"{block_name} must be a mapping.")
    return block.get(key)


def _join_token_sequence(value: Any, field_name: str) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                raise InvalidConfiguration(f"{field_name} entries must be strings.")
        return ",".join(value)
    raise InvalidConfiguration(f"{field_name} must be a string or list of strings.")
