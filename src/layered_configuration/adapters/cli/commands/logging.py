"""Logging demonstration command.

Contents:
    * :func:`cli_logdemo` - Preview log output of a lib_log_rich theme.
"""

from __future__ import annotations

import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS


@click.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--theme", default="classic", help="Logging theme to preview")
def cli_logdemo(theme: str) -> None:
    """Emit sample events in every level to preview the console log output."""
    import lib_log_rich
    import lib_log_rich.runtime

    # logdemo() starts its own runtime
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()

    result = lib_log_rich.logdemo(theme=theme)
    click.echo(f"\nLog demo completed (theme: {result.theme})")


__all__ = ["cli_logdemo"]
