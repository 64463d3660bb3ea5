"""Domain layer - pure layering logic with no I/O or framework dependencies.

Contents:
    * :mod:`.values` - Value kinds, the ``UNDEFINED`` sentinel, tree copy/merge
    * :mod:`.paths` - Path splitting and layer-name normalization
    * :mod:`.layer` - A single named configuration tree
    * :mod:`.configuration` - The prioritized layer stack
    * :mod:`.enums` - Domain enumerations (OutputFormat, FileFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .configuration import ConfigurationState, LayeredConfiguration, LayerNames
from .enums import FileFormat, OutputFormat
from .errors import (
    ConfigFileError,
    ConfigurationError,
    IllegalConfigurationFileError,
    InvalidPathError,
    LayerNotFoundError,
    NoLayersError,
)
from .layer import Layer
from .paths import DEFAULT_PATH_SEPARATOR, normalize_layer_name, split_path
from .values import UNDEFINED, NodeKind, classify, deep_copy_tree, deep_merge

__all__ = [
    # Core
    "ConfigurationState",
    "Layer",
    "LayerNames",
    "LayeredConfiguration",
    # Paths
    "DEFAULT_PATH_SEPARATOR",
    "normalize_layer_name",
    "split_path",
    # Values
    "UNDEFINED",
    "NodeKind",
    "classify",
    "deep_copy_tree",
    "deep_merge",
    # Enums
    "FileFormat",
    "OutputFormat",
    # Errors
    "ConfigFileError",
    "ConfigurationError",
    "IllegalConfigurationFileError",
    "InvalidPathError",
    "LayerNotFoundError",
    "NoLayersError",
]
