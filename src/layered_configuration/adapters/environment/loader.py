"""Environment variables as a configuration layer.

Provides the EnvironmentOptions Pydantic model controlling which variables
are taken and how their names become paths, and the loader that turns the
selected variables into a layer with the highest priority.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ...domain.configuration import LayeredConfiguration
from ...domain.layer import Layer

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT_LAYER = "process_env"


class EnvironmentOptions(BaseModel):
    """Validated, immutable filter and naming options for environment loading.

    Attributes:
        lower_case: Lowercase variable names before they become paths.
        whitelist: Only these variable names are taken (empty = all).
        match: Only names containing a match of this regex are taken.
        separator: Split names on this string into nested paths.

    Example:
        >>> options = EnvironmentOptions(match="^APP_", separator="__")
        >>> options.match.pattern
        '^APP_'
        >>> options.lower_case
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    lower_case: bool = True
    whitelist: tuple[str, ...] = ()
    match: re.Pattern[str] | None = None
    separator: str | None = None

    @field_validator("whitelist", mode="before")
    @classmethod
    def _coerce_string_to_tuple(cls, v: Any) -> Any:
        """Accept a single variable name where a list is expected.

        Examples:
            >>> EnvironmentOptions._coerce_string_to_tuple("HOME")
            ('HOME',)
            >>> EnvironmentOptions._coerce_string_to_tuple("")
            ()
        """
        if isinstance(v, str):
            return (v,) if v.strip() else ()
        return v

    @field_validator("separator", mode="before")
    @classmethod
    def _coerce_empty_separator_to_none(cls, v: Any) -> Any:
        """An empty separator means "do not split"."""
        if isinstance(v, str) and not v:
            return None
        return v

    def selects(self, name: str) -> bool:
        """Return True when variable *name* passes the whitelist and the regex.

        Example:
            >>> EnvironmentOptions(whitelist=["A", "B"], match="B").selects("B")
            True
            >>> EnvironmentOptions(whitelist=["A", "B"], match="B").selects("A")
            False
        """
        if self.whitelist and name not in self.whitelist:
            return False
        return self.match is None or self.match.search(name) is not None

    def path_of(self, name: str) -> list[str]:
        """Return the path segments *name* is stored under.

        Example:
            >>> EnvironmentOptions(separator="__").path_of("APP__DB__HOST")
            ['app', 'db', 'host']
            >>> EnvironmentOptions(lower_case=False).path_of("App.Name")
            ['App.Name']
        """
        key = name.lower() if self.lower_case else name
        if self.separator is None:
            return [key]
        return [piece for piece in key.split(self.separator) if piece]


def load_from_environment(
    configuration: LayeredConfiguration,
    options: EnvironmentOptions | None = None,
    environ: Mapping[str, str] | None = None,
    layer_name: str = DEFAULT_ENVIRONMENT_LAYER,
) -> Layer:
    """Add the selected environment variables as a layer with the highest priority.

    Variables are processed in sorted name order, so when two names map to
    the same path the later one wins. A layer of the same name is replaced.

    Args:
        configuration: Configuration receiving the layer.
        options: Filter and naming options; defaults apply when omitted.
        environ: Variables to read; ``os.environ`` when omitted.
        layer_name: Name of the created layer.

    Returns:
        The newly added layer.

    Example:
        >>> config = LayeredConfiguration()
        >>> env = {"APP__PORT": "8080", "HOME": "/root"}
        >>> _ = load_from_environment(config, EnvironmentOptions(match="^APP", separator="__"), env)
        >>> config.get("app.port")
        '8080'
        >>> config.has("home")
        False
    """
    opts = options or EnvironmentOptions()
    source = os.environ if environ is None else environ
    scratch = Layer(layer_name)
    taken = 0
    for name in sorted(source):
        if not opts.selects(name):
            continue
        scratch.set_node(opts.path_of(name), source[name])
        taken += 1
    layer = configuration.add_layer(layer_name, scratch.data)
    logger.debug("Loaded environment layer", extra={"layer": layer.name, "variables": taken})
    return layer


__all__ = [
    "DEFAULT_ENVIRONMENT_LAYER",
    "EnvironmentOptions",
    "load_from_environment",
]
