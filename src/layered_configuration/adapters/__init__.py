"""Adapters layer - codecs, storage, environment, tool configuration, logging, CLI.

Contents:
    * :mod:`.codec` - HJSON/JSON decoders and encoders
    * :mod:`.storage` - Layer files on disk
    * :mod:`.environment` - Process environment as a layer
    * :mod:`.config` - Tool configuration, display, overrides
    * :mod:`.logging` - lib_log_rich setup
    * :mod:`.memory` - In-memory implementations for testing
    * :mod:`.cli` - rich_click command line interface
"""

from __future__ import annotations

__all__: list[str] = []
