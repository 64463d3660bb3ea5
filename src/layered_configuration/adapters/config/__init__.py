"""Configuration adapter - tool settings, display, and command line overrides.

Contents:
    * :mod:`.loader` - Tool configuration loading with caching
    * :mod:`.settings` - Typed ``[layered_configuration]`` settings
    * :mod:`.display` - Value, merged view, and tool configuration display
    * :mod:`.overrides` - ``KEY=VALUE`` parsing and ``--set`` overrides
"""

from __future__ import annotations

from .display import display_config, display_layers, display_value
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides, coerce_value, parse_assignment
from .settings import LayeringSettings, load_layering_settings

__all__ = [
    "LayeringSettings",
    "apply_overrides",
    "coerce_value",
    "display_config",
    "display_layers",
    "display_value",
    "get_config",
    "get_default_config_path",
    "load_layering_settings",
    "parse_assignment",
]
