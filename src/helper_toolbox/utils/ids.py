from __future__ import annotations

import uuid
from datetime import UTC, datetime

from helper_toolbox.utils.errors import UnsupportedFormatError
from helper_toolbox.utils.strings import normalize_string


def uuid_str(format: str | None = "v4") -> str:
    """Return a new UUID as text (``v4`` random or ``v1`` time based)."""

    key = normalize_string(format)
    if key in ("", "4", "v4"):
        return str(uuid.uuid4())
    if key in ("1", "v1"):
        return str(uuid.uuid1())
    raise UnsupportedFormatError(f"UUID format {format!r} is not supported")


guid = uuid_str


def now() -> datetime:
    """Current local time, timezone aware."""

    return datetime.now(UTC).astimezone()


def utc_now() -> datetime:
    return datetime.now(UTC)
