"""Logging adapter - lib_log_rich runtime setup.

Contents:
    * :mod:`.setup` - LoggingConfigModel and init_logging
"""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
