"""Digest helpers on top of :mod:`hashlib`."""

from __future__ import annotations

import hashlib
from typing import Any

from helper_toolbox.utils.strings import normalize_string, to_string_safe

DEFAULT_HASH_ALGORITHM = "sha256"
DEFAULT_TEXT_ENCODING = "ascii"

_CHUNK_SIZE = 64 * 1024


def hash_data(data: Any, algorithm: str | None = None, encoding: str | None = None) -> bytes:
    """Return the raw digest of ``data``.

    ``data`` may be bytes, a binary file-like object (anything with ``read``)
    or any other value, which is stringified and encoded with ``encoding``
    (``ascii`` by default). Falsy data hashes the empty input.

    Raises:
        ValueError: ``algorithm`` is not known to hashlib.
    """

    algorithm = normalize_string(algorithm) or DEFAULT_HASH_ALGORITHM
    encoding = normalize_string(encoding) or DEFAULT_TEXT_ENCODING

    digest = hashlib.new(algorithm)
    if not data:
        return digest.digest()

    if isinstance(data, (bytes, bytearray, memoryview)):
        digest.update(data)
    elif callable(getattr(data, "read", None)):
        while chunk := data.read(_CHUNK_SIZE):
            if isinstance(chunk, str):
                chunk = chunk.encode(encoding)
            digest.update(chunk)
    else:
        digest.update(to_string_safe(data).encode(encoding))
    return digest.digest()


def md5(data: Any, encoding: str | None = None) -> bytes:
    return hash_data(data, "md5", encoding)


def sha1(data: Any, encoding: str | None = None) -> bytes:
    return hash_data(data, "sha1", encoding)


def sha256(data: Any, encoding: str | None = None) -> bytes:
    return hash_data(data, "sha256", encoding)


def sha384(data: Any, encoding: str | None = None) -> bytes:
    return hash_data(data, "sha384", encoding)


def sha512(data: Any, encoding: str | None = None) -> bytes:
    return hash_data(data, "sha512", encoding)


def are_equal(x: Any, y: Any, algorithm: str | None = None, encoding: str | None = None) -> bool:
    """Compare two values by their digests."""

    return hash_data(x, algorithm, encoding) == hash_data(y, algorithm, encoding)
