"""Parse ``KEY=VALUE`` strings from the command line.

Two consumers share the value coercion:

* the root ``--set SECTION.KEY=VALUE`` option patching the tool configuration,
* the ``set DIRECTORY PATH=VALUE`` command writing into a layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed tool configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Read *raw* as JSON when possible, else keep it as a string.

    Examples:
        >>> coerce_value("8080")
        8080
        >>> coerce_value("null") is None
        True
        >>> coerce_value('{"a": [1, 2]}')
        {'a': [1, 2]}
        >>> coerce_value("localhost")
        'localhost'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def split_assignment(raw: str) -> tuple[str, str]:
    """Split ``PATH=VALUE`` at the first ``=`` into the stripped path and the raw value.

    Raises:
        ValueError: No ``=`` or an empty path.

    Examples:
        >>> split_assignment("server.url=http://h/?a=b")
        ('server.url', 'http://h/?a=b')
        >>> split_assignment("=1")
        Traceback (most recent call last):
        ...
        ValueError: Invalid assignment '=1': path is empty
    """
    if "=" not in raw:
        raise ValueError(f"Invalid assignment {raw!r}: must contain '='")
    path, value = raw.split("=", maxsplit=1)
    path = path.strip()
    if not path:
        raise ValueError(f"Invalid assignment {raw!r}: path is empty")
    return path, value


def parse_assignment(raw: str) -> tuple[str, CoercedValue]:
    """Split ``PATH=VALUE`` and coerce the value.

    Example:
        >>> parse_assignment("server.port=8080")
        ('server.port', 8080)
    """
    path, value = split_assignment(raw)
    return path, coerce_value(value)


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE`` for the tool configuration.

    Raises:
        ValueError: Missing ``=``, no dot in the key, or empty components.

    Example:
        >>> override = parse_override("layered_configuration.path_separator=/")
        >>> override.section, override.key_path, override.value
        ('layered_configuration', ('path_separator',), '/')
    """
    path_part, value_str = split_assignment(raw)
    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    section, *keys = path_part.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value_str))


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` override deep-merged in.

    Raises:
        ValueError: Any override string is malformed.

    Examples:
        >>> cfg = Config({"lib_log_rich": {"console_level": "WARNING"}}, {})
        >>> apply_overrides(cfg, ("lib_log_rich.console_level=DEBUG",))["lib_log_rich"]["console_level"]
        'DEBUG'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))
    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_assignment",
    "parse_override",
    "split_assignment",
]
