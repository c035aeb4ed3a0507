"""File name and file system helpers."""

from __future__ import annotations

import glob
import logging
import mimetypes
from os import PathLike
from pathlib import Path
from typing import Any

from wcmatch import glob as wcglob

from helper_toolbox.utils.strings import is_empty_string, normalize_string, to_string_safe
from helper_toolbox.utils.values import as_array, distinct_array

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

_SNIFF_SIZE = 8 * 1024
_MATCH_FLAGS = wcglob.GLOBSTAR | wcglob.CASE
_TEXT_CONTROL_BYTES = {7, 8, 9, 10, 12, 13, 27}


def _patterns(patterns: str | list[str] | None) -> list[str]:
    return [to_string_safe(p) for p in as_array(patterns) if not is_empty_string(p)]


def detect_mime_by_filename(name: str | PathLike[str], default: str | None = DEFAULT_MIME_TYPE) -> str | None:
    """Guess the MIME type from the file extension."""

    mime, _ = mimetypes.guess_type(to_string_safe(name), strict=False)
    mime = normalize_string(mime)
    if mime == "":
        logger.debug("No MIME type for file name", extra={"file_name": to_string_safe(name)})
        return default
    return mime


def glob_files(
    patterns: str | list[str],
    root_dir: str | PathLike[str] | None = None,
    recursive: bool = True,
) -> list[str]:
    """Collect matches for every pattern, without duplicates.

    Matches keep the order of the patterns; within one pattern they are sorted.
    """

    matches: list[str] = []
    for pattern in _patterns(patterns):
        matches.extend(sorted(glob.glob(pattern, root_dir=root_dir, recursive=recursive)))
    return distinct_array(matches) or []


def match(values: Any, patterns: str | list[str]) -> list[str]:
    """Return the values matching at least one of the glob ``patterns``.

    Glob semantics, case-sensitive: ``*`` stops at ``/`` and ``**/`` spans
    zero or more directories.
    """

    pattern_list = _patterns(patterns)
    matched: list[str] = []
    if not pattern_list:
        return matched
    for value in as_array(values, remove_empty=False):
        if value is None:
            continue
        text = to_string_safe(value)
        if wcglob.globmatch(text, pattern_list, flags=_MATCH_FLAGS):
            matched.append(text)
    return matched


def mkdirs(path: str | PathLike[str], mode: int = 0o777) -> Path:
    """Create ``path`` and missing parents; an existing directory is fine."""

    directory = Path(path)
    directory.mkdir(mode=mode, parents=True, exist_ok=True)
    return directory


def _looks_binary(chunk: bytes) -> bool:
    if not chunk:
        return False
    if b"\x00" in chunk:
        return True

    suspicious = sum(1 for b in chunk if b < 32 and b not in _TEXT_CONTROL_BYTES)
    return suspicious / len(chunk) > 0.1


def is_binary(data_or_path: bytes | str | PathLike[str] | None) -> bool | None:
    """Heuristic binary check of raw bytes or of a file's first 8 KiB.

    ``None`` passes through. Strings and paths are treated as file paths.
    """

    if data_or_path is None:
        return None

    if isinstance(data_or_path, (bytes, bytearray, memoryview)):
        return _looks_binary(bytes(data_or_path[:_SNIFF_SIZE]))

    with open(data_or_path, "rb") as f:
        return _looks_binary(f.read(_SNIFF_SIZE))
