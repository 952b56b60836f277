"""Comma token list helper tests."""

from __future__ import annotations

import pytest
from robot_build_step.command_assembly.token_lists import prefixed_tokens, split_comma_tokens


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("a, b ,c", ("a", "b", "c")),
        (",, ", ()),
        ("", ()),
        (None, ()),
        ("single", ("single",)),
        ("  Valid Login  ", ("Valid Login",)),
        ("a,", ("a",)),
        ("a;b c", ("a;b c",)),
    ],
)
def test_split_comma_tokens(value, expected) -> None:
    assert split_comma_tokens(value) == expected


def test_prefixed_tokens_keeps_left_to_right_order() -> None:
    assert prefixed_tokens("smoke,regress", "--include=") == (
        "--include=smoke",
        "--include=regress",
    )


def test_prefixed_tokens_without_prefix_is_empty() -> None:
    assert prefixed_tokens("smoke", "") == ()
