"""Public package surface: the layered configuration and its file/environment loaders.

Routes imports through the architectural layers:

- Domain exports: layer stack, sentinel, errors
- Composition exports: wired adapters (file and environment loading)
- Metadata: package information

Example:
    >>> from layered_configuration import LayeredConfiguration
    >>> config = LayeredConfiguration()
    >>> _ = config.add_layer("defaults", {"server": {"port": 80}})
    >>> _ = config.add_layer("user", {"server": {"port": 8080}})
    >>> config.get("server.port")
    8080
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports (environment options model)
from .adapters.environment.loader import EnvironmentOptions

# Composition exports (wired adapters)
from .composition import (
    load_from_directory,
    load_from_environment,
    load_from_file,
    save_to_directory,
    save_to_file,
)

# Domain exports
from .domain import (
    UNDEFINED,
    ConfigFileError,
    IllegalConfigurationFileError,
    InvalidPathError,
    Layer,
    LayeredConfiguration,
    LayerNotFoundError,
    NoLayersError,
    NodeKind,
    classify,
)

__all__ = [
    "UNDEFINED",
    "ConfigFileError",
    "EnvironmentOptions",
    "IllegalConfigurationFileError",
    "InvalidPathError",
    "Layer",
    "LayerNotFoundError",
    "LayeredConfiguration",
    "NoLayersError",
    "NodeKind",
    "classify",
    "load_from_directory",
    "load_from_environment",
    "load_from_file",
    "print_info",
    "save_to_directory",
    "save_to_file",
]
