"""Strict JSON codec backed by orjson."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import orjson

from ...domain.enums import FileFormat


class JsonCodec:
    """Decode and encode strict JSON.

    Example:
        >>> codec = JsonCodec()
        >>> codec.decode('{"a": {"b": null}}')
        {'a': {'b': None}}
        >>> print(codec.encode({"a": [1, True]}), end="")
        {
          "a": [
            1,
            true
          ]
        }
    """

    file_format = FileFormat.JSON

    def decode(self, text: str) -> object:
        """Parse *text*; raises ``orjson.JSONDecodeError`` (a ``ValueError``)."""
        return orjson.loads(text)

    def encode(self, data: Mapping[str, Any]) -> str:
        """Serialize *data*; raises ``orjson.JSONEncodeError`` (a ``TypeError``)."""
        return orjson.dumps(data, option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE).decode("utf-8")


__all__ = ["JsonCodec"]
