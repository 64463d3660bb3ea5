"""Run ``layconf`` and turn the outcome into an exit code.

Contents:
    * :func:`main` - Entry point shared by the console script and ``python -m``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from layered_configuration import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from ...composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and return its exit code.

    The ``--traceback`` flag stored by the root group decides between the
    full traceback and a short summary.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    """Run the root group in non-standalone mode with the factory as ``obj``."""
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # SystemExit from commands included
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute ``layconf`` and return the exit code.

    Args:
        argv: CLI arguments; ``sys.argv[1:]`` when None.
        restore_traceback: Put the previous traceback flags back afterwards.
        services_factory: Factory returning AppServices, normally
            ``composition.build_production``.

    Raises:
        ValueError: *services_factory* is missing.

    Example:
        >>> from layered_configuration.composition import build_production
        >>> main(["--help"], services_factory=build_production)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    previous_state = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Only the main thread may shut the logging runtime down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
