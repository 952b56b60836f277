"""Command assembly exports."""

from .command_assembler import CommandLine, assemble_command_line
from .token_lists import prefixed_tokens, split_comma_tokens

__all__ = [
    "CommandLine",
    "assemble_command_line",
    "prefixed_tokens",
    "split_comma_tokens",
]
