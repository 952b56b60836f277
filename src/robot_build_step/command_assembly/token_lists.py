"""Comma-separated token list helpers."""

from __future__ import annotations


def split_comma_tokens(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated value into trimmed, non-empty tokens.

    A value without commas is one token; it is never split on other characters.
    """
    if not value:
        return ()
    if "," not in value:
        stripped = value.strip()
        return (stripped,) if stripped else ()
    return tuple(token.strip() for token in value.split(",") if token.strip())


def prefixed_tokens(value: str | None, prefix: str) -> tuple[str, ...]:
    """Return one `<prefix><token>` option per token in `value`."""
    if not prefix:
        return ()
    return tuple(f"{prefix}{token}" for token in split_comma_tokens(value))
