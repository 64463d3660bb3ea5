"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """Invalid tool configuration or CLI input.

    Example:
        >>> from layered_configuration.domain.errors import ConfigurationError
        >>> str(ConfigurationError("path_separator must not be empty"))
        'path_separator must not be empty'
    """


class InvalidPathError(ValueError):
    """A write was requested for a path without any usable segment.

    Example:
        >>> err = InvalidPathError("path ' . ' has no segments")
        >>> isinstance(err, ValueError)
        True
    """


class NoLayersError(ValueError):
    """A write without explicit layer was requested while no layer exists.

    Example:
        >>> isinstance(NoLayersError("no layers"), ValueError)
        True
    """


class LayerNotFoundError(KeyError):
    """An operation needed a layer that is not registered.

    Example:
        >>> err = LayerNotFoundError("user")
        >>> err.layer_name
        'user'
        >>> str(err)
        "layer 'user' does not exist"
    """

    def __init__(self, layer_name: str) -> None:
        super().__init__(layer_name)
        self.layer_name = layer_name

    def __str__(self) -> str:
        return f"layer {self.layer_name!r} does not exist"


class ConfigFileError(Exception):
    """Reading, decoding, or writing a configuration file failed.

    Example:
        >>> from pathlib import Path
        >>> err = ConfigFileError("cannot read file", Path("conf/user.hjson"))
        >>> str(err)
        'cannot read file: conf/user.hjson'
        >>> err.path.name
        'user.hjson'
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path.as_posix()}"


class IllegalConfigurationFileError(ConfigFileError):
    """A configuration file decoded to something other than a mapping.

    Example:
        >>> from pathlib import Path
        >>> err = IllegalConfigurationFileError("illegal configuration file", Path("list.json"))
        >>> isinstance(err, ConfigFileError)
        True
    """


__all__ = [
    "ConfigFileError",
    "ConfigurationError",
    "IllegalConfigurationFileError",
    "InvalidPathError",
    "LayerNotFoundError",
    "NoLayersError",
]
