"""Read-only commands on a layer directory.

Contents:
    * :func:`cli_layers` - Layer names in priority order.
    * :func:`cli_get` - Value at a path.
    * :func:`cli_has` - Whether a path is defined.
    * :func:`cli_show` - Merged view of all (or selected) layers.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from ....domain.enums import OutputFormat
from ....domain.values import UNDEFINED
from ..constants import CLICK_CONTEXT_SETTINGS, FORMAT_OPTION
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import DIRECTORY_ARGUMENT, LAYER_OPTION, open_configuration, restriction

logger = logging.getLogger(__name__)

ENV_OPTION = click.option(
    "--env/--no-env",
    "with_environment",
    default=False,
    help="Add the process environment as the highest priority layer",
)


@click.command("layers", context_settings=CLICK_CONTEXT_SETTINGS)
@DIRECTORY_ARGUMENT
@ENV_OPTION
@click.pass_context
def cli_layers(ctx: click.Context, directory: Path, with_environment: bool) -> None:
    """List the layers loaded from DIRECTORY, highest priority first."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-layers", extra={"command": "layers", "directory": str(directory)}):
        configuration = open_configuration(cli_ctx, directory, with_environment=with_environment)
        logger.info("Listing layers", extra={"count": len(configuration)})
        for name in configuration.get_layer_names():
            click.echo(name)


@click.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@DIRECTORY_ARGUMENT
@click.argument("path")
@LAYER_OPTION
@click.option("--ignore-nulls", is_flag=True, default=False, help="Skip layers whose value is null")
@click.option("--merged", is_flag=True, default=False, help="Deep-merge the branch over all searched layers")
@ENV_OPTION
@FORMAT_OPTION
@click.pass_context
def cli_get(
    ctx: click.Context,
    directory: Path,
    path: str,
    layers: tuple[str, ...],
    ignore_nulls: bool,
    merged: bool,
    with_environment: bool,
    output_format: OutputFormat,
) -> None:
    """Print the value at PATH from the first layer of DIRECTORY defining it.

    Exits with 1 when no searched layer defines PATH.
    """
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "get", "directory": str(directory), "path": path, "format": output_format.value}
    with lib_log_rich.runtime.bind(job_id="cli-get", extra=extra):
        configuration = open_configuration(cli_ctx, directory, with_environment=with_environment)
        if merged:
            value = configuration.get_merged(path, restrict_to_layer=restriction(layers))
        else:
            value = configuration.get(path, ignore_nulls, restriction(layers), default=UNDEFINED)
        if value is UNDEFINED:
            logger.info("Path is not defined", extra={"path": path})
            raise SystemExit(ExitCode.NOT_DEFINED)
        cli_ctx.services.display_value(value, output_format=output_format)


@click.command("has", context_settings=CLICK_CONTEXT_SETTINGS)
@DIRECTORY_ARGUMENT
@click.argument("path")
@LAYER_OPTION
@click.option("--ignore-nulls", is_flag=True, default=False, help="Treat null values as undefined")
@ENV_OPTION
@click.pass_context
def cli_has(
    ctx: click.Context,
    directory: Path,
    path: str,
    layers: tuple[str, ...],
    ignore_nulls: bool,
    with_environment: bool,
) -> None:
    """Print ``true`` and exit 0 when PATH is defined, else ``false`` and exit 1."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-has", extra={"command": "has", "path": path}):
        configuration = open_configuration(cli_ctx, directory, with_environment=with_environment)
        found = configuration.has(path, ignore_nulls, restriction(layers))
        click.echo("true" if found else "false")
        if not found:
            raise SystemExit(ExitCode.NOT_DEFINED)


@click.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@DIRECTORY_ARGUMENT
@LAYER_OPTION
@ENV_OPTION
@FORMAT_OPTION
@click.pass_context
def cli_show(
    ctx: click.Context,
    directory: Path,
    layers: tuple[str, ...],
    with_environment: bool,
    output_format: OutputFormat,
) -> None:
    """Print the merged view of the layers in DIRECTORY."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-show", extra={"command": "show", "format": output_format.value}):
        configuration = open_configuration(cli_ctx, directory, with_environment=with_environment)
        logger.info("Displaying merged layers", extra={"layers": configuration.get_layer_names()})
        cli_ctx.services.display_layers(
            configuration, output_format=output_format, restrict_to_layer=restriction(layers)
        )


__all__ = ["cli_get", "cli_has", "cli_layers", "cli_show"]
