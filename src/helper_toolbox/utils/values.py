"""Defensive coercion and comparison helpers."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, TypeVar

from helper_toolbox.utils.strings import is_empty_string, normalize_string, to_string_safe

T = TypeVar("T")

DEFAULT_BOOLEAN = False


def is_none(value: Any) -> bool:
    return value is None


def to_boolean_safe(value: Any, default: Any = DEFAULT_BOOLEAN) -> Any:
    """``bool(value)``, or ``default`` when ``value`` is ``None``."""

    if value is None:
        return default
    return bool(value)


def as_array(value: Any, remove_empty: bool = True) -> list[Any]:
    """Return ``value`` as a list.

    Lists are copied, tuples/sets/generators are expanded, and anything else
    (including strings, bytes and mappings) becomes a single item. With
    ``remove_empty`` falsy items are dropped.
    """

    if isinstance(value, list):
        items = list(value)
    elif isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray, dict)):
        items = list(value)
    else:
        items = [value]

    if remove_empty:
        items = [item for item in items if item]
    return items


def distinct_array(items: list[T] | None) -> list[T] | None:
    """Drop repeated items, keeping the first occurrence of each."""

    if items is None:
        return None

    result: list[T] = []
    seen: set[Any] = set()
    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            # Unhashable; fall back to an equality scan.
            if item in result:
                continue
        result.append(item)
    return result


def clone_object(value: T) -> T:
    """Deep copy through a JSON round trip; falsy values pass through."""

    if not value:
        return value
    return json.loads(json.dumps(value))


def from_json(text: Any) -> Any:
    """Parse JSON text; empty or blank input yields ``None``."""

    if is_empty_string(text):
        return None
    return json.loads(to_string_safe(text))


def compare_values(x: Any, y: Any) -> int:
    """Three-way comparison; equal or incomparable values give 0."""

    if x is y:
        return 0
    try:
        if x > y:
            return 1
        if x < y:
            return -1
    except TypeError:
        return 0
    return 0


def compare_values_desc(x: Any, y: Any) -> int:
    return compare_values(y, x)


def compare_as_strings(x: Any, y: Any, ignore_case: bool = False) -> int:
    if ignore_case:
        return compare_values(normalize_string(x), normalize_string(y))
    return compare_values(to_string_safe(x), to_string_safe(y))


def compare_as_strings_desc(x: Any, y: Any, ignore_case: bool = False) -> int:
    return compare_as_strings(y, x, ignore_case)
