from __future__ import annotations

import pytest

from helper_toolbox.utils.entities import (
    decode_entities,
    encode_entities,
    html_decode,
    html_encode,
    xml_decode,
    xml_encode,
)
from helper_toolbox.utils.errors import UnsupportedFormatError


def test_html_encode_escapes_markup_and_named_characters() -> None:
    assert html_encode('<a href="x">Café & co</a>') == (
        "&lt;a href=&quot;x&quot;&gt;Caf&eacute; &amp; co&lt;/a&gt;"
    )
    assert html_encode("it's") == "it&apos;s"


def test_html4_uses_numeric_apostrophe() -> None:
    assert encode_entities("it's ©", format="html4") == "it&#39;s &copy;"


def test_html5_knows_entities_missing_from_html4() -> None:
    assert encode_entities("⇒", format="5") == "&rArr;"
    assert encode_entities("Ā", format="html5") == "&Amacr;"
    assert encode_entities("Ā", format="html4") == "Ā"


def test_xml_encode_only_touches_predefined_entities() -> None:
    assert xml_encode("<é & 'q'>") == "&lt;é &amp; &apos;q&apos;&gt;"


def test_html_decode() -> None:
    assert html_decode("&lt;p&gt;Caf&eacute; &#169; &#x41;&lt;/p&gt;") == "<p>Café © A</p>"


def test_xml_decode_leaves_html_only_entities() -> None:
    assert xml_decode("&lt;&amp;&apos;&#65;&#x42;&eacute;") == "<&'AB&eacute;"


@pytest.mark.parametrize("reference", ["&#99999999;", "&#x110000;", "&#xD800;", "&#0;"])
def test_xml_decode_replaces_invalid_code_points(reference: str) -> None:
    assert xml_decode(f"a{reference}b") == "a\ufffdb"
    assert html_decode(f"a{reference}b") == "a\ufffdb"


def test_bytes_are_decoded_with_encoding() -> None:
    assert html_encode("é".encode("latin-1"), "latin-1") == "&eacute;"
    assert decode_entities(b"&amp;", format="xml") == "&"


def test_none_passes_through() -> None:
    assert html_encode(None) is None
    assert xml_decode(None) is None


@pytest.mark.parametrize("alias", ["", "h", "HTML", "4", "v4", "htm4", "5", "v5", "htm5", "x"])
def test_format_aliases_are_accepted(alias: str) -> None:
    assert encode_entities("&", format=alias) == "&amp;"


def test_unsupported_format() -> None:
    with pytest.raises(UnsupportedFormatError):
        encode_entities("x", format="yaml")
    with pytest.raises(ValueError):
        decode_entities(None, format="yaml")
