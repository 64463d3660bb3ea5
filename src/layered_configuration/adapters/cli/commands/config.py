"""Show the settings ``layconf`` itself runs with.

Contents:
    * :func:`cli_config` - Print the merged tool configuration, or one section of it.

These are the tool's own settings (``[layered_configuration]`` and
``[lib_log_rich]``) read through lib_layered_config, not the layers of a
directory handled by the other commands.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from ....domain.enums import OutputFormat
from ..constants import CLICK_CONTEXT_SETTINGS, FORMAT_OPTION
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import fail

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@FORMAT_OPTION
@click.option("--section", default=None, metavar="NAME", help="Show one section only, e.g. 'layered_configuration'")
@click.option("--profile", default=None, metavar="NAME", help="Read the settings of this profile instead")
@click.pass_context
def cli_config(ctx: click.Context, output_format: OutputFormat, section: str | None, profile: str | None) -> None:
    """Display the tool's own settings merged from all sources.

    Precedence: defaults -> app -> host -> user -> dotenv -> env -> --set
    """
    cli_ctx = get_cli_context(ctx)
    shown, shown_profile = cli_ctx.config_for_profile(profile)
    extra = {"command": "config", "format": output_format.value, "profile": shown_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying tool configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(shown, output_format=output_format, section=section, profile=shown_profile)
        except ValueError as exc:
            fail(str(exc), ExitCode.INVALID_ARGUMENT)


__all__ = ["cli_config"]
