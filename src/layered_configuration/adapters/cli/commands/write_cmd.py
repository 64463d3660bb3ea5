"""Commands changing one layer of a directory and saving it back.

Contents:
    * :func:`cli_set` - Store a value in a layer.
    * :func:`cli_unset` - Remove a node from a layer.

Only the target layer is written. It goes back into the file it was loaded
from, or into ``<layer>.hjson`` when the layer is new.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from ....domain.configuration import LayeredConfiguration
from ....domain.errors import ConfigFileError, InvalidPathError
from ....domain.values import UNDEFINED
from ...config.overrides import coerce_value, split_assignment
from ...storage.files import layer_file_for
from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ._shared import DIRECTORY_ARGUMENT, fail, file_error_code, open_configuration

logger = logging.getLogger(__name__)

TARGET_LAYER_OPTION = click.option(
    "--layer",
    "layer_name",
    required=True,
    metavar="NAME",
    help="Layer to change; created when it does not exist",
)


def _write_and_save(
    cli_ctx: CLIContext, configuration: LayeredConfiguration, directory: Path, path: str, value: Any, layer_name: str
) -> Path:
    """Apply the change to *layer_name* and save that layer into *directory*."""
    if not layer_name.strip():
        fail("layer name must not be blank", ExitCode.INVALID_ARGUMENT)
    layer = configuration.get_layer(layer_name) or configuration.add_layer(layer_name)
    try:
        configuration.set(path, value, layer.name)
    except InvalidPathError as exc:
        fail(str(exc), ExitCode.INVALID_ARGUMENT)
    target = layer_file_for(directory, layer.name)
    try:
        return cli_ctx.services.save_to_file(configuration, layer.name, target)
    except ConfigFileError as exc:
        logger.error("Failed to save layer", extra={"layer": layer.name, "error": str(exc)})
        fail(str(exc), file_error_code(exc))


@click.command("set", context_settings=CLICK_CONTEXT_SETTINGS)
@DIRECTORY_ARGUMENT
@click.argument("assignment", metavar="PATH=VALUE")
@TARGET_LAYER_OPTION
@click.option("--string", "as_string", is_flag=True, default=False, help="Store VALUE verbatim, without JSON parsing")
@click.pass_context
def cli_set(ctx: click.Context, directory: Path, assignment: str, layer_name: str, as_string: bool) -> None:
    """Store VALUE at PATH in a layer of DIRECTORY and save the layer.

    VALUE is read as JSON when it parses (numbers, true/false, null, arrays,
    objects) and kept as a string otherwise.
    """
    cli_ctx = get_cli_context(ctx)
    try:
        path, raw_value = split_assignment(assignment)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="PATH=VALUE") from exc
    value = raw_value if as_string else coerce_value(raw_value)
    extra = {"command": "set", "directory": str(directory), "path": path, "layer": layer_name}
    with lib_log_rich.runtime.bind(job_id="cli-set", extra=extra):
        configuration = open_configuration(cli_ctx, directory)
        written = _write_and_save(cli_ctx, configuration, directory, path, value, layer_name)
        logger.info("Stored value", extra={"path": path, "file": str(written)})
        click.echo(f"{path} set in {written.name}")


@click.command("unset", context_settings=CLICK_CONTEXT_SETTINGS)
@DIRECTORY_ARGUMENT
@click.argument("path")
@TARGET_LAYER_OPTION
@click.pass_context
def cli_unset(ctx: click.Context, directory: Path, path: str, layer_name: str) -> None:
    """Remove PATH and everything below it from a layer of DIRECTORY and save the layer."""
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "unset", "directory": str(directory), "path": path, "layer": layer_name}
    with lib_log_rich.runtime.bind(job_id="cli-unset", extra=extra):
        configuration = open_configuration(cli_ctx, directory)
        if configuration.get_layer(layer_name) is None:
            fail(f"layer {layer_name!r} does not exist in {directory}", ExitCode.FILE_NOT_FOUND)
        written = _write_and_save(cli_ctx, configuration, directory, path, UNDEFINED, layer_name)
        logger.info("Removed value", extra={"path": path, "file": str(written)})
        click.echo(f"{path} removed from {written.name}")


__all__ = ["cli_set", "cli_unset"]
