"""Body formats and codecs."""

from .codecs import Codec, JSONCodec, ElementTreeCodec
from .format import (
    Format,
    SuffixFormat,
    PreparedRequest,
    json_format,
    xml_format,
    json_suffix_format,
    xml_suffix_format,
)

__all__ = [
    "Codec",
    "JSONCodec",
    "ElementTreeCodec",
    "Format",
    "SuffixFormat",
    "PreparedRequest",
    "json_format",
    "xml_format",
    "json_suffix_format",
    "xml_suffix_format",
]
