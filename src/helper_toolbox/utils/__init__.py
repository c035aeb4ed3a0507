"""Thin convenience helpers around the standard library."""

from helper_toolbox.utils.entities import (
    decode_entities,
    encode_entities,
    html_decode,
    html_encode,
    xml_decode,
    xml_encode,
)
from helper_toolbox.utils.errors import UnsupportedFormatError
from helper_toolbox.utils.files import (
    DEFAULT_MIME_TYPE,
    detect_mime_by_filename,
    glob_files,
    is_binary,
    match,
    mkdirs,
)
from helper_toolbox.utils.hashing import are_equal, hash_data, md5, sha1, sha256, sha384, sha512
from helper_toolbox.utils.ids import guid, now, utc_now, uuid_str
from helper_toolbox.utils.strings import (
    DEFAULT_ENCODING,
    is_empty_string,
    normalize_string,
    replace_all_strings,
    to_string_safe,
)
from helper_toolbox.utils.values import (
    DEFAULT_BOOLEAN,
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

__all__ = [
    "DEFAULT_BOOLEAN",
    "DEFAULT_ENCODING",
    "DEFAULT_MIME_TYPE",
    "UnsupportedFormatError",
    "are_equal",
    "as_array",
    "clone_object",
    "compare_as_strings",
    "compare_as_strings_desc",
    "compare_values",
    "compare_values_desc",
    "decode_entities",
    "detect_mime_by_filename",
    "distinct_array",
    "encode_entities",
    "from_json",
    "glob_files",
    "guid",
    "hash_data",
    "html_decode",
    "html_encode",
    "is_binary",
    "is_empty_string",
    "is_none",
    "match",
    "md5",
    "mkdirs",
    "normalize_string",
    "now",
    "replace_all_strings",
    "sha1",
    "sha256",
    "sha384",
    "sha512",
    "to_boolean_safe",
    "to_string_safe",
    "utc_now",
    "uuid_str",
    "xml_decode",
    "xml_encode",
]
