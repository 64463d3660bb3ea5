"""Type-safe domain enums for output formats and layer file formats."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for value and configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class FileFormat(str, Enum):
    """Layer file formats, valued by their file extension.

    Attributes:
        HJSON: Relaxed JSON dialect; the format layers are saved in.
        JSON: Strict JSON.

    Example:
        >>> FileFormat.HJSON.value
        '.hjson'
        >>> FileFormat(".json") is FileFormat.JSON
        True
    """

    HJSON = ".hjson"
    JSON = ".json"


__all__ = [
    "FileFormat",
    "OutputFormat",
]
