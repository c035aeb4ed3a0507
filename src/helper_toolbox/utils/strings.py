from __future__ import annotations

from collections.abc import Callable
from typing import Any

StringConverter = Callable[[str], str]

DEFAULT_ENCODING = "utf-8"


def default_string_normalizer(value: str) -> str:
    return value.lower().strip()


def to_string_safe(value: Any, default: str = "") -> str:
    """Convert ``value`` to ``str`` without ever failing on ``None``.

    Bytes are decoded with :data:`DEFAULT_ENCODING` (undecodable bytes are
    replaced). An empty result is swapped for ``default``.
    """

    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode(DEFAULT_ENCODING, errors="replace")

    text = "" if value is None else str(value)
    if text == "":
        return default
    return text


def normalize_string(value: Any, normalizer: StringConverter | None = None) -> str:
    """Lower-case and strip ``value`` (or apply a custom normalizer)."""

    if normalizer is None:
        normalizer = default_string_normalizer
    return normalizer(to_string_safe(value))


def is_empty_string(value: Any) -> bool:
    return to_string_safe(value).strip() == ""


def replace_all_strings(value: Any, search: Any, replacement: Any) -> str | None:
    """Replace every literal occurrence of ``search``; ``None`` passes through."""

    if value is None:
        return None

    search_text = to_string_safe(search)
    if search_text == "":
        return to_string_safe(value)
    return to_string_safe(value).replace(search_text, to_string_safe(replacement))
