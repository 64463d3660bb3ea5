"""Render resolved values, merged layer views, and the tool configuration.

Contents:
    * :func:`display_value` - One resolved value (``get``).
    * :func:`display_layers` - Merged view of a layered configuration (``show``).
    * :func:`display_config` - The tool's own configuration via lib_layered_config.

Human output renders scalars bare and branches as HJSON; JSON output uses
orjson. Pending log output is flushed first so it never interleaves with
the rendered document.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.runtime
import orjson
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from ...domain.configuration import LayeredConfiguration, LayerNames
from ...domain.enums import OutputFormat
from ...domain.values import UNDEFINED, NodeKind, classify
from ..codec.hjson_codec import HjsonCodec


def _flush_logs() -> None:
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def render_value(value: Any, output_format: OutputFormat = OutputFormat.HUMAN) -> str:
    """Return the text :func:`display_value` prints for *value*.

    Examples:
        >>> render_value("localhost")
        'localhost'
        >>> render_value(None), render_value(True), render_value(8080)
        ('null', 'true', '8080')
        >>> render_value({"port": 80}, OutputFormat.JSON)
        '{\\n  "port": 80\\n}'
    """
    if output_format is OutputFormat.JSON:
        return orjson.dumps(value, option=orjson.OPT_INDENT_2).decode("utf-8")
    kind = classify(value)
    if kind is NodeKind.STRING:
        return str(value)
    if kind in (NodeKind.MAPPING, NodeKind.ARRAY):
        return HjsonCodec().encode(value).rstrip("\n")
    if kind is NodeKind.OPAQUE:
        return repr(value)
    return orjson.dumps(value).decode("utf-8")


def display_value(
    value: Any, *, output_format: OutputFormat = OutputFormat.HUMAN, console: Console | None = None
) -> None:
    """Print a single resolved value.

    Args:
        value: Value returned by :meth:`LayeredConfiguration.get`.
        output_format: Human (bare scalars, HJSON branches) or JSON.
        console: Rich console to print on; a stdout console when None.
    """
    _flush_logs()
    (console or Console()).print(render_value(value, output_format), markup=False, highlight=False, soft_wrap=True)


def display_layers(
    configuration: LayeredConfiguration,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    restrict_to_layer: LayerNames | None = None,
    console: Console | None = None,
) -> None:
    """Print the merged tree of *configuration*.

    The human format starts with a comment naming the merged layers from
    highest to lowest priority; JSON output is the bare merged document.
    """
    _flush_logs()
    out = console or Console()
    merged = configuration.get_merged("", restrict_to_layer=restrict_to_layer)
    document = {} if merged is UNDEFINED else merged
    if output_format is OutputFormat.JSON:
        out.print(render_value(document, output_format), markup=False, highlight=False, soft_wrap=True)
        return
    names = configuration.get_layer_names() if restrict_to_layer is None else restrict_to_layer
    label = names if isinstance(names, str) else ", ".join(names)
    out.print(f"# layers: {label or '-'}", markup=False, highlight=False, soft_wrap=True)
    out.print(render_value(document, output_format), markup=False, highlight=False, soft_wrap=True)


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display the tool configuration using lib_layered_config's Rich display.

    Raises:
        ValueError: The requested section does not exist.
    """
    _flush_logs()
    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


__all__ = [
    "display_config",
    "display_layers",
    "display_value",
    "render_value",
]
