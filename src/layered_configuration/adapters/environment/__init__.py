"""Environment adapter - process environment as a layer.

Contents:
    * :mod:`.loader` - EnvironmentOptions model and loader
"""

from __future__ import annotations

from .loader import DEFAULT_ENVIRONMENT_LAYER, EnvironmentOptions, load_from_environment

__all__ = [
    "DEFAULT_ENVIRONMENT_LAYER",
    "EnvironmentOptions",
    "load_from_environment",
]
