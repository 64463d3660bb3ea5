"""Settings and options shared by several ``layconf`` commands.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - ``-h``/``--help`` on every command.
    * :data:`TRACEBACK_SUMMARY_LIMIT` / :data:`TRACEBACK_VERBOSE_LIMIT` - Character budgets for error output.
    * :data:`FORMAT_OPTION` - ``--format human|json``, delivered as :class:`OutputFormat`.
"""

from __future__ import annotations

from typing import Final

import rich_click as click

from ...domain.enums import OutputFormat

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _to_output_format(_ctx: click.Context, _param: click.Parameter, value: str) -> OutputFormat:
    """Convert the ``--format`` choice (any case) into the enum.

    Example:
        >>> _to_output_format(None, None, "JSON")
        <OutputFormat.JSON: 'json'>
    """
    return OutputFormat(value.lower())


FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    callback=_to_output_format,
    help="Output format (human-readable or JSON)",
)

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "FORMAT_OPTION",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
