"""Shared helpers for the layer directory commands.

Internal module (underscore prefix) providing the load/exit patterns every
command working on a layer directory repeats.

Contents:
    * :func:`open_configuration` - Build a configuration from a directory (+ environment).
    * :func:`fail` - Report an error on stderr and exit with an :class:`ExitCode`.
    * :data:`DIRECTORY_ARGUMENT` - Click argument for the layer directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import rich_click as click

from ....domain.configuration import LayeredConfiguration
from ....domain.errors import ConfigFileError, ConfigurationError
from ...config.settings import LayeringSettings, load_layering_settings
from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

DIRECTORY_ARGUMENT = click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)

LAYER_OPTION = click.option(
    "--layer",
    "layers",
    multiple=True,
    metavar="NAME",
    help="Search only this layer (repeatable; searched in the given order)",
)


def fail(message: str, code: ExitCode) -> NoReturn:
    """Print *message* on stderr and leave with *code*."""
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)


def file_error_code(exc: ConfigFileError) -> ExitCode:
    """Return PERMISSION_DENIED when *exc* was caused by a permission error, else CONFIG_ERROR.

    Example:
        >>> file_error_code(ConfigFileError("broken"))
        <ExitCode.CONFIG_ERROR: 78>
    """
    if isinstance(exc.__cause__, PermissionError):
        return ExitCode.PERMISSION_DENIED
    return ExitCode.CONFIG_ERROR


def load_settings(cli_ctx: CLIContext) -> LayeringSettings:
    """Return the ``[layered_configuration]`` settings or exit with CONFIG_ERROR."""
    try:
        return load_layering_settings(cli_ctx.config)
    except ConfigurationError as exc:
        logger.error("Invalid tool configuration", extra={"error": str(exc)})
        fail(str(exc), ExitCode.CONFIG_ERROR)


def open_configuration(cli_ctx: CLIContext, directory: Path, *, with_environment: bool = False) -> LayeredConfiguration:
    """Load every layer file of *directory* and optionally the environment layer.

    The environment layer is added when *with_environment* is set or the
    tool setting ``load_environment`` is true; it then has the highest
    priority.

    Raises:
        SystemExit: ``CONFIG_ERROR`` when a file cannot be loaded or the tool
            settings are invalid, ``PERMISSION_DENIED`` when a file is not readable.
    """
    settings = load_settings(cli_ctx)
    configuration = LayeredConfiguration(path_separator=settings.path_separator)
    try:
        cli_ctx.services.load_from_directory(configuration, directory)
    except ConfigFileError as exc:
        logger.error("Failed to load layer directory", extra={"directory": str(directory), "error": str(exc)})
        fail(str(exc), file_error_code(exc))
    if with_environment or settings.load_environment:
        cli_ctx.services.load_from_environment(
            configuration,
            options=settings.environment_options(),
            layer_name=settings.environment_layer,
        )
    return configuration


def restriction(layers: tuple[str, ...]) -> list[str] | None:
    """Turn repeated ``--layer`` values into a restriction (None = all layers).

    Example:
        >>> restriction(()) is None
        True
        >>> restriction(("user", "defaults"))
        ['user', 'defaults']
    """
    return list(layers) if layers else None


__all__ = [
    "DIRECTORY_ARGUMENT",
    "LAYER_OPTION",
    "fail",
    "file_error_code",
    "load_settings",
    "open_configuration",
    "restriction",
]
