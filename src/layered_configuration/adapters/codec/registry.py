"""Codec lookup by file extension."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from ...domain.enums import FileFormat
from .hjson_codec import HjsonCodec
from .json_codec import JsonCodec

if TYPE_CHECKING:
    from ...application.ports import DocumentCodec

#: Codecs for every recognized layer file extension.
DEFAULT_CODECS: Final[Mapping[FileFormat, DocumentCodec]] = MappingProxyType(
    {
        FileFormat.HJSON: HjsonCodec(),
        FileFormat.JSON: JsonCodec(),
    }
)

#: Format used when saving layers (``<layer>.hjson``).
NATIVE_FORMAT: Final[FileFormat] = FileFormat.HJSON


def file_format_of(path: str | Path) -> FileFormat | None:
    """Return the recognized format of *path*, matching the extension case-insensitively.

    Example:
        >>> file_format_of("conf/User.JSON")
        <FileFormat.JSON: '.json'>
        >>> file_format_of("notes.txt") is None
        True
    """
    suffix = Path(path).suffix.lower()
    try:
        return FileFormat(suffix)
    except ValueError:
        return None


def codec_for(path: str | Path, codecs: Mapping[FileFormat, DocumentCodec] | None = None) -> DocumentCodec | None:
    """Return the codec for *path* or ``None`` when its extension is not recognized."""
    file_format = file_format_of(path)
    if file_format is None:
        return None
    return (codecs or DEFAULT_CODECS).get(file_format)


__all__ = [
    "DEFAULT_CODECS",
    "NATIVE_FORMAT",
    "codec_for",
    "file_format_of",
]
