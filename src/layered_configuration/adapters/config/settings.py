"""Typed ``[layered_configuration]`` settings of the CLI.

Provides the LayeringSettings Pydantic model and the loader bridging
lib_layered_config's dictionary output to it.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ...domain.errors import ConfigurationError
from ...domain.paths import DEFAULT_PATH_SEPARATOR
from ..environment.loader import DEFAULT_ENVIRONMENT_LAYER, EnvironmentOptions

SECTION = "layered_configuration"


class LayeringSettings(BaseModel):
    """Validated, immutable CLI settings for reading layer directories.

    Example:
        >>> settings = LayeringSettings(path_separator="/", environment_separator="")
        >>> settings.path_separator
        '/'
        >>> settings.environment_separator is None
        True
    """

    model_config = ConfigDict(frozen=True)

    path_separator: str = DEFAULT_PATH_SEPARATOR
    load_environment: bool = False
    environment_layer: str = DEFAULT_ENVIRONMENT_LAYER
    environment_match: str | None = None
    environment_separator: str | None = "__"
    environment_lower_case: bool = True

    @field_validator("path_separator")
    @classmethod
    def _reject_empty_separator(cls, v: str) -> str:
        if not v:
            raise ValueError("path_separator must not be empty")
        return v

    @field_validator("environment_match", "environment_separator", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        """TOML has no null; an empty string means "not configured"."""
        if isinstance(v, str) and not v:
            return None
        return v

    @field_validator("environment_match")
    @classmethod
    def _reject_invalid_regex(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                re.compile(v)
            except re.error as exc:
                raise ValueError(f"environment_match is not a valid regex: {exc}") from exc
        return v

    @field_validator("environment_layer")
    @classmethod
    def _reject_blank_layer_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("environment_layer must not be blank")
        return v

    def environment_options(self) -> EnvironmentOptions:
        """Return the environment loading options these settings describe.

        Example:
            >>> LayeringSettings(environment_match="^APP_").environment_options().separator
            '__'
        """
        return EnvironmentOptions(
            lower_case=self.environment_lower_case,
            match=self.environment_match,
            separator=self.environment_separator,
        )


def load_layering_settings(config: Config) -> LayeringSettings:
    """Parse the ``[layered_configuration]`` section of *config*.

    Args:
        config: Already-loaded tool configuration.

    Returns:
        Settings with defaults for every missing key.

    Raises:
        ConfigurationError: The section holds invalid values.

    Example:
        >>> load_layering_settings(Config({"layered_configuration": {"load_environment": True}}, {})).load_environment
        True
        >>> load_layering_settings(Config({}, {})).environment_layer
        'process_env'
    """
    section: Any = config.get(SECTION, default={}) or {}
    try:
        if not isinstance(section, Mapping):
            return LayeringSettings.model_validate(section)
        return LayeringSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [{SECTION}] settings: {exc}") from exc


__all__ = [
    "LayeringSettings",
    "load_layering_settings",
]
