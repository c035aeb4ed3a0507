"""Unit tests for string coercion helpers."""

from __future__ import annotations

import pytest

from helper_toolbox.utils.strings import (
    is_empty_string,
    normalize_string,
    replace_all_strings,
    to_string_safe,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        ("", ""),
        (0, "0"),
        (False, "False"),
        (b"bytes", "bytes"),
        (12.5, "12.5"),
    ],
)
def test_to_string_safe(value: object, expected: str) -> None:
    assert to_string_safe(value) == expected


def test_to_string_safe_default_for_empty() -> None:
    assert to_string_safe(None, "n/a") == "n/a"
    assert to_string_safe("", "n/a") == "n/a"
    assert to_string_safe(" ", "n/a") == " "


def test_normalize_string() -> None:
    assert normalize_string("  MiXeD ") == "mixed"
    assert normalize_string(None) == ""
    assert normalize_string("abc", str.upper) == "ABC"


def test_is_empty_string() -> None:
    assert is_empty_string(None)
    assert is_empty_string("  \t\n")
    assert not is_empty_string(0)
    assert not is_empty_string("x")


def test_replace_all_strings() -> None:
    assert replace_all_strings("a.b.c", ".", "/") == "a/b/c"
    assert replace_all_strings("a+b", "+", "") == "ab"
    assert replace_all_strings("(x)", "(x)", "y") == "y"
    assert replace_all_strings(None, "a", "b") is None
    assert replace_all_strings("abc", "", "-") == "abc"
