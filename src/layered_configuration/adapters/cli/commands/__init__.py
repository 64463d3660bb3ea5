"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Read commands (layers, get, has, show) from :mod:`.read_cmd`
    * Write commands (set, unset) from :mod:`.write_cmd`
    * Tool configuration command from :mod:`.config`
    * Logging demo from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .logging import cli_logdemo
from .read_cmd import cli_get, cli_has, cli_layers, cli_show
from .write_cmd import cli_set, cli_unset

__all__ = [
    "cli_config",
    "cli_get",
    "cli_has",
    "cli_info",
    "cli_layers",
    "cli_logdemo",
    "cli_set",
    "cli_show",
    "cli_unset",
]
