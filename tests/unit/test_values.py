"""Unit tests for coercion and comparison helpers."""

from __future__ import annotations

from helper_toolbox.utils.values import (
    as_array,
    clone_object,
    compare_as_strings,
    compare_as_strings_desc,
    compare_values,
    compare_values_desc,
    distinct_array,
    from_json,
    is_none,
    to_boolean_safe,
)


def test_is_none_and_to_boolean_safe() -> None:
    assert is_none(None)
    assert not is_none(0)

    assert to_boolean_safe(None) is False
    assert to_boolean_safe(None, True) is True
    assert to_boolean_safe(0, True) is False
    assert to_boolean_safe("x") is True


def test_as_array() -> None:
    assert as_array("x") == ["x"]
    assert as_array([1, 0, None, 2]) == [1, 2]
    assert as_array([1, 0, None], remove_empty=False) == [1, 0, None]
    assert as_array((1, 2)) == [1, 2]
    assert as_array(None) == []
    assert as_array(None, remove_empty=False) == [None]
    assert as_array({"a": 1}) == [{"a": 1}]


def test_as_array_copies_lists() -> None:
    source = [1, 2]
    result = as_array(source)

    assert result == source
    assert result is not source


def test_distinct_array_keeps_first_occurrence() -> None:
    assert distinct_array([3, 1, 3, 2, 1]) == [3, 1, 2]
    assert distinct_array([{"a": 1}, {"a": 1}, [1], [1]]) == [{"a": 1}, [1]]
    assert distinct_array([]) == []
    assert distinct_array(None) is None


def test_clone_object_is_deep() -> None:
    original = {"a": [1, {"b": 2}]}
    clone = clone_object(original)

    assert clone == original
    clone["a"][1]["b"] = 3
    assert original["a"][1]["b"] == 2
    assert clone_object(None) is None


def test_from_json() -> None:
    assert from_json('{"a": [1, 2]}') == {"a": [1, 2]}
    assert from_json(b"[true]") == [True]
    assert from_json("   ") is None
    assert from_json(None) is None


def test_compare_values() -> None:
    assert compare_values(1, 2) == -1
    assert compare_values(2, 1) == 1
    assert compare_values(2, 2) == 0
    assert compare_values(1, "a") == 0
    assert compare_values_desc(1, 2) == 1


def test_compare_as_strings() -> None:
    assert compare_as_strings(10, 9) == -1
    assert compare_as_strings("B", "a") == -1
    assert compare_as_strings("B", "a", ignore_case=True) == 1
    assert compare_as_strings(" A ", "a", ignore_case=True) == 0
    assert compare_as_strings(None, "") == 0
    assert compare_as_strings_desc("a", "b") == 1
