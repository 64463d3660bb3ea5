"""Path splitting and layer-name normalization."""

from __future__ import annotations

import re
from typing import Final

DEFAULT_PATH_SEPARATOR: Final[str] = "."

_LAYER_NAME_RESERVED = re.compile(r"[./\\:]")


def split_path(path: object, separator: str = DEFAULT_PATH_SEPARATOR) -> list[str]:
    """Split *path* into its canonical segment list.

    The separator is matched literally. Segments are trimmed and empty or
    whitespace-only segments are dropped, so repeated, leading, and trailing
    separators are tolerated.

    Args:
        path: Raw path string.
        separator: Literal separator, one or more characters.

    Returns:
        Ordered list of non-empty, trimmed segments. May be empty.

    Raises:
        TypeError: If *path* is not a string.

    Example:
        >>> split_path("a.b.c")
        ['a', 'b', 'c']
        >>> split_path("..a. .b..")
        ['a', 'b']
        >>> split_path(" server :: port ", "::")
        ['server', 'port']
        >>> split_path(" . ")
        []
    """
    if not isinstance(path, str):
        raise TypeError(f"path needs to be a string, got {type(path).__name__}")
    return [segment.strip() for segment in path.split(separator) if segment.strip()]


def normalize_layer_name(name: object) -> str:
    """Return the storage key for a layer name.

    Every ``.``, ``/``, ``\\`` and ``:`` is replaced with ``_`` so names
    derived from file paths stay usable as keys.

    Raises:
        TypeError: If *name* is not a string.

    Example:
        >>> normalize_layer_name("conf/local.user")
        'conf_local_user'
        >>> normalize_layer_name("C:\\\\cfg")
        'C__cfg'
    """
    if not isinstance(name, str):
        raise TypeError(f"layer name needs to be a string, got {type(name).__name__}")
    return _LAYER_NAME_RESERVED.sub("_", name)


def validate_separator(separator: object) -> str:
    """Return *separator* after checking it is a non-empty string.

    Raises:
        TypeError: If *separator* is not a string.
        ValueError: If *separator* is empty.
    """
    if not isinstance(separator, str):
        raise TypeError(f"path separator needs to be a string, got {type(separator).__name__}")
    if not separator:
        raise ValueError("path separator must not be empty")
    return separator


__all__ = [
    "DEFAULT_PATH_SEPARATOR",
    "normalize_layer_name",
    "split_path",
    "validate_separator",
]
