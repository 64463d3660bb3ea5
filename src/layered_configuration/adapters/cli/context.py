"""State shared between the root group and the ``layconf`` subcommands.

Contents:
    * :class:`CLIContext` - What the root group resolved (tool config, services, flags).
    * :func:`store_cli_context` / :func:`get_cli_context` - Keep it in ``ctx.obj``.
    * :class:`TracebackState` and helpers - Save and restore the
      ``lib_cli_exit_tools`` traceback flags around a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from ..config.overrides import apply_overrides

if TYPE_CHECKING:
    from ...composition import AppServices


class TracebackState(NamedTuple):
    """Traceback flags of ``lib_cli_exit_tools.config`` at one moment.

    Example:
        >>> TracebackState(enabled=True, force_color=False) == (True, False)
        True
    """

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Everything the root group resolved before a subcommand runs.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Tool configuration of :attr:`profile` with the ``--set``
            overrides applied.
        services: Adapters the commands work through.
        profile: Profile named on the root group, if any.
        set_overrides: The raw ``--set`` strings.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def config_for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the tool configuration of *profile* and the profile it belongs to.

        Without *profile* the root group's configuration is returned. Another
        profile is read again through the services and gets the same
        ``--set`` overrides.

        Example:
            >>> from unittest.mock import MagicMock
            >>> cli_ctx = CLIContext(traceback=False, config=Config({}, {}), services=MagicMock(), profile="dev")
            >>> cli_ctx.config_for_profile(None)[1]
            'dev'
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Put a :class:`CLIContext` into ``ctx.obj`` in place of the services factory.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=Config({}, {}), services=MagicMock())
        >>> ctx.obj.traceback
        True
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` of the current run.

    Raises:
        RuntimeError: ``ctx.obj`` holds something else, i.e. the root group
            has not run.
    """
    cli_ctx = ctx.obj
    if isinstance(cli_ctx, CLIContext):
        return cli_ctx
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch verbose, coloured tracebacks of ``lib_cli_exit_tools`` on or off.

    Example:
        >>> apply_traceback_preferences(False)
        >>> bool(lib_cli_exit_tools.config.traceback)
        False
    """
    restore_traceback_state(TracebackState(enabled=bool(enabled), force_color=bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write *state* back into ``lib_cli_exit_tools.config``.

    Example:
        >>> original = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(original)
        >>> snapshot_traceback_state() == original
        True
    """
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
