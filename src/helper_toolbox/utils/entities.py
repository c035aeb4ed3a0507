"""HTML/XML entity encoding and decoding.

Supported formats (case-insensitive):

- ``""``, ``h``, ``html``: all named HTML entities (HTML5 table)
- ``4``, ``v4``, ``html4``, ``htm4``: HTML 4 named entities
- ``5``, ``v5``, ``html5``, ``htm5``: HTML5 named entities
- ``x``, ``xml``: the five predefined XML entities

Encoding always escapes ``& < > " '``. The HTML tables additionally replace
non-ASCII characters that have a named entity.
"""

from __future__ import annotations

import html
import re
from functools import cache
from html.entities import codepoint2name
from html.entities import html5 as html5_entities
from typing import Any

from helper_toolbox.utils.errors import UnsupportedFormatError
from helper_toolbox.utils.strings import normalize_string, to_string_safe


_FORMAT_ALIASES: dict[str, str] = {
    "": "html5",
    "h": "html5",
    "html": "html5",
    "4": "html4",
    "v4": "html4",
    "html4": "html4",
    "htm4": "html4",
    "5": "html5",
    "v5": "html5",
    "html5": "html5",
    "htm5": "html5",
    "x": "xml",
    "xml": "xml",
}

_XML_ENTITIES: dict[str, str] = {
    "&": "amp",
    "<": "lt",
    ">": "gt",
    '"': "quot",
    "'": "apos",
}

_XML_NAMES: dict[str, str] = {name: char for char, name in _XML_ENTITIES.items()}

_XML_REFERENCE = re.compile(r"&(?:#(\d+)|#[xX]([0-9a-fA-F]+)|(amp|lt|gt|quot|apos));")


def _resolve_format(format: str | None) -> str:
    key = normalize_string(format)
    try:
        return _FORMAT_ALIASES[key]
    except KeyError:
        raise UnsupportedFormatError(f"Entity format {format!r} is not supported") from None


@cache
def _encoding_table(table: str) -> dict[str, str]:
    names: dict[str, str] = {}
    if table == "xml":
        return dict(_XML_ENTITIES)

    for codepoint, name in codepoint2name.items():
        if codepoint > 127:
            names[chr(codepoint)] = name

    if table == "html5":
        candidates: dict[str, list[str]] = {}
        for name, char in html5_entities.items():
            if len(char) == 1 and ord(char) > 127 and name.endswith(";"):
                candidates.setdefault(char, []).append(name[:-1])
        for char, choices in candidates.items():
            names.setdefault(char, min(choices, key=lambda n: (len(n), n)))

    names.update(_XML_ENTITIES)
    if table == "html4":
        # HTML 4 has no &apos;
        names["'"] = "#39"
    return names


def _prepare(data: Any, encoding: str | None) -> str:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode(normalize_string(encoding) or "utf-8")
    return to_string_safe(data)


def encode_entities(data: Any, encoding: str | None = None, format: str | None = None) -> str | None:
    """Replace characters by entity references; ``None`` passes through."""

    table = _encoding_table(_resolve_format(format))
    if data is None:
        return None

    text = _prepare(data, encoding)
    return "".join(f"&{table[c]};" if c in table else c for c in text)


def _codepoint(number: int) -> str:
    # Same replacement html.unescape uses for NUL, surrogates and overflow.
    if number == 0 or 0xD800 <= number <= 0xDFFF or number > 0x10FFFF:
        return "\ufffd"
    return chr(number)


def _decode_xml(match: re.Match[str]) -> str:
    decimal, hexadecimal, name = match.groups()
    if decimal is not None:
        return _codepoint(int(decimal))
    if hexadecimal is not None:
        return _codepoint(int(hexadecimal, 16))
    return _XML_NAMES[name]


def decode_entities(data: Any, encoding: str | None = None, format: str | None = None) -> str | None:
    """Resolve entity references; ``None`` passes through."""

    table = _resolve_format(format)
    if data is None:
        return None

    text = _prepare(data, encoding)
    if table == "xml":
        return _XML_REFERENCE.sub(_decode_xml, text)
    return html.unescape(text)


def html_encode(data: Any, encoding: str | None = None) -> str | None:
    return encode_entities(data, encoding, "html")


def html_decode(data: Any, encoding: str | None = None) -> str | None:
    return decode_entities(data, encoding, "html")


def xml_encode(data: Any, encoding: str | None = None) -> str | None:
    return encode_entities(data, encoding, "xml")


def xml_decode(data: Any, encoding: str | None = None) -> str | None:
    return decode_entities(data, encoding, "xml")
