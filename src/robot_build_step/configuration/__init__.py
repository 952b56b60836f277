"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import load_run_configuration, parse_run_configuration
from .runtime_settings import (
    ConfigurationError,
    InvalidConfiguration,
    RunConfiguration,
    build_run_configuration,
)

__all__ = [
    "RunConfiguration",
    "ConfigurationError",
    "InvalidConfiguration",
    "build_run_configuration",
    "load_run_configuration",
    "parse_run_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
