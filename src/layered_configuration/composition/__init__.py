"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Tool configuration services
from ..adapters.config.display import display_config, display_layers, display_value
from ..adapters.config.loader import get_config

# Layer sources
from ..adapters.environment.loader import load_from_environment

# Logging services
from ..adapters.logging.setup import init_logging
from ..adapters.storage.files import load_from_directory, load_from_file, save_to_directory, save_to_file

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.storage import DisplaySpy, LayerStoreSpy
    from ..application.ports import (
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

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_display_value: DisplayValue = display_value
    _assert_display_layers: DisplayLayers = display_layers
    _assert_load_from_file: LoadFromFile = load_from_file
    _assert_save_to_file: SaveToFile = save_to_file
    _assert_load_from_directory: LoadFromDirectory = load_from_directory
    _assert_save_to_directory: SaveToDirectory = save_to_directory
    _assert_load_from_environment: LoadFromEnvironment = load_from_environment
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    load_from_file: LoadFromFile
    save_to_file: SaveToFile
    load_from_directory: LoadFromDirectory
    save_to_directory: SaveToDirectory
    load_from_environment: LoadFromEnvironment
    display_value: DisplayValue
    display_layers: DisplayLayers


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        load_from_file=load_from_file,
        save_to_file=save_to_file,
        load_from_directory=load_from_directory,
        save_to_directory=save_to_directory,
        load_from_environment=load_from_environment,
        display_value=display_value,
        display_layers=display_layers,
    )


def build_testing(*, store: LayerStoreSpy | None = None, display: DisplaySpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        store: Optional LayerStoreSpy holding the layer documents. When None,
            an empty store is created.
        display: Optional DisplaySpy capturing what commands print. When
            None, a fresh spy is created.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        DisplaySpy,
        LayerStoreSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_from_environment_in_memory,
    )

    layer_store = store if store is not None else LayerStoreSpy()
    display_spy = display if display is not None else DisplaySpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_from_file=layer_store.load_from_file,
        save_to_file=layer_store.save_to_file,
        load_from_directory=layer_store.load_from_directory,
        save_to_directory=layer_store.save_to_directory,
        load_from_environment=load_from_environment_in_memory,
        display_value=display_spy.display_value,
        display_layers=display_spy.display_layers,
    )


__all__ = [
    # Tool configuration
    "display_config",
    "get_config",
    # Layers
    "load_from_directory",
    "load_from_environment",
    "load_from_file",
    "save_to_directory",
    "save_to_file",
    # Display
    "display_layers",
    "display_value",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
