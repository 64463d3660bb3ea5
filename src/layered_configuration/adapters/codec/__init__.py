"""Codec adapter - HJSON and JSON decoders/encoders for layer files.

Contents:
    * :mod:`.hjson_codec` - HJSON via ``hjson``
    * :mod:`.json_codec` - JSON via ``orjson``
    * :mod:`.registry` - Extension to codec lookup
"""

from __future__ import annotations

from .hjson_codec import HjsonCodec
from .json_codec import JsonCodec
from .registry import DEFAULT_CODECS, NATIVE_FORMAT, codec_for, file_format_of

__all__ = [
    "DEFAULT_CODECS",
    "NATIVE_FORMAT",
    "HjsonCodec",
    "JsonCodec",
    "codec_for",
    "file_format_of",
]
