"""The ``layconf`` command group.

Contents:
    * :func:`cli` - Root group: reads the tool configuration, starts logging
      and registers the subcommands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from layered_configuration import __init__conf__

from ..config.overrides import apply_overrides
from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from ...composition import AppServices


def _services_from(ctx: click.Context) -> AppServices:
    """Call the services factory the entry point placed in ``ctx.obj``."""
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()


def _tool_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read the tool configuration of *profile* and apply ``--set`` on top.

    Raises:
        click.UsageError: An override is malformed or collides with a scalar.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show full Python traceback on errors")
@click.option("--profile", default=None, metavar="NAME", help="Read the tool configuration of a named profile")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override a tool setting, e.g. layered_configuration.path_separator=/ (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Work with a directory of configuration layers.

    Example:
        >>> from click.testing import CliRunner
        >>> from layered_configuration.composition import build_testing
        >>> CliRunner().invoke(cli, ["info"], obj=build_testing).exit_code
        0
    """
    services = _services_from(ctx)
    config = _tool_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # The command modules import this package, so they are loaded after ``cli`` exists.
    from . import commands

    for name in commands.__all__:
        cli.add_command(getattr(commands, name))


_register_commands()


__all__ = ["cli"]
