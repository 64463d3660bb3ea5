"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no process environment, no logging
framework.

Contents:
    * :mod:`.config` - In-memory tool configuration adapters
    * :mod:`.storage` - In-memory layer storage, display, and environment adapters
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .storage import DisplaySpy, LayerStoreSpy, load_from_environment_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from ...application.ports import (
        DisplayConfig,
        DisplayLayers,
        DisplayValue,
        GetConfig,
        InitLogging,
        LoadFromDirectory,
        LoadFromEnvironment,
        LoadFromFile,
        SaveToDirectory,
        SaveToFile,
    )

    _store = LayerStoreSpy()
    _display = DisplaySpy()
    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_from_environment: LoadFromEnvironment = load_from_environment_in_memory
    _assert_load_from_file: LoadFromFile = _store.load_from_file
    _assert_save_to_file: SaveToFile = _store.save_to_file
    _assert_load_from_directory: LoadFromDirectory = _store.load_from_directory
    _assert_save_to_directory: SaveToDirectory = _store.save_to_directory
    _assert_display_value: DisplayValue = _display.display_value
    _assert_display_layers: DisplayLayers = _display.display_layers

__all__ = [
    "DisplaySpy",
    "LayerStoreSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_from_environment_in_memory",
]
