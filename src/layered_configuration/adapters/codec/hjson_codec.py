"""HJSON codec - the native format layer files are saved in."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import hjson

from ...domain.enums import FileFormat


class HjsonCodec:
    """Decode and encode the relaxed HJSON dialect.

    Objects decode to plain ``dict`` (not ``OrderedDict``) so decoded trees
    can be descended into by the layer traversal.

    Example:
        >>> codec = HjsonCodec()
        >>> codec.decode("{\\n  # comment\\n  a: 1\\n  b: text without quotes\\n}")
        {'a': 1, 'b': 'text without quotes'}
        >>> codec.decode(codec.encode({"x": {"y": [1, 2]}}))
        {'x': {'y': [1, 2]}}
    """

    file_format = FileFormat.HJSON

    def decode(self, text: str) -> object:
        """Parse *text*; raises ``ValueError`` on malformed input."""
        return hjson.loads(text, object_pairs_hook=dict)

    def encode(self, data: Mapping[str, Any]) -> str:
        """Serialize *data*; raises ``TypeError`` for unserializable leaves."""
        return hjson.dumps(data, ensure_ascii=False) + "\n"


__all__ = ["HjsonCodec"]
