"""Tool configuration loader with caching and profile support.

Reads the CLI's own settings (logging, default path separator, environment
loading) through lib_layered_config. The layered configurations the tool
*operates on* are handled by :mod:`layered_configuration.adapters.storage`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from layered_configuration import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Loader signature plus the ``cache_clear`` hook used by tests."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names lib_layered_config would refuse.

    Raises:
        ValueError: Empty, too long, path traversal, or invalid characters.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` bundled next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One read per (profile, start_dir) for the lifetime of the CLI process.
@lru_cache(maxsize=4)
def _read_tool_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the tool configuration: defaults, app, host, user, dotenv, env.

    Args:
        profile: Optional profile name inserting ``profile/<name>/`` into
            every configuration path.
        start_dir: Directory seeding ``.env`` discovery (cwd when None).

    Returns:
        Immutable lib_layered_config ``Config`` with provenance.

    Raises:
        ValueError: Invalid profile name.

    Example:
        >>> config = get_config()
        >>> isinstance(config.as_dict(), dict)
        True
        >>> config.get("nonexistent", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_tool_config(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget cached tool configurations so the next call re-reads disk."""
    _read_tool_config.cache_clear()


_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
