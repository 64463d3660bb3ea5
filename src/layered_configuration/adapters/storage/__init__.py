"""Storage adapter - layer files on disk.

Contents:
    * :mod:`.files` - Single-file and directory load/save
"""

from __future__ import annotations

from .files import (
    layer_file_for,
    list_layer_files,
    load_from_directory,
    load_from_file,
    save_to_directory,
    save_to_file,
)

__all__ = [
    "layer_file_for",
    "list_layer_files",
    "load_from_directory",
    "load_from_file",
    "save_to_directory",
    "save_to_file",
]
