"""CLI adapter - rich_click command line interface ``layconf``.

Contents:
    * :mod:`.root` - Root command group and global options
    * :mod:`.main` - Entry point with exit code handling
    * :mod:`.context` - Typed Click context and traceback state
    * :mod:`.commands` - Subcommands
    * :mod:`.exit_codes` - ExitCode enum
"""

from __future__ import annotations

from .context import (
    CLIContext,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "apply_traceback_preferences",
    "cli",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
