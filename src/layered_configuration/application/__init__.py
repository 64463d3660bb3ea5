"""Application layer - port definitions.

Port protocols define the interfaces adapter implementations must satisfy.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    DisplayLayers,
    DisplayValue,
    DocumentCodec,
    GetConfig,
    InitLogging,
    LoadFromDirectory,
    LoadFromEnvironment,
    LoadFromFile,
    SaveToDirectory,
    SaveToFile,
)

__all__ = [
    "DisplayConfig",
    "DisplayLayers",
    "DisplayValue",
    "DocumentCodec",
    "GetConfig",
    "InitLogging",
    "LoadFromDirectory",
    "LoadFromEnvironment",
    "LoadFromFile",
    "SaveToDirectory",
    "SaveToFile",
]
