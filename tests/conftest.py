"""Shared pytest fixtures for domain, adapter, and CLI tests.

- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from layered_configuration.domain import LayeredConfiguration

if TYPE_CHECKING:
    from layered_configuration.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the tool configuration cache before the test."""
    from layered_configuration.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real tool Config instances from test data dicts (no provenance)."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def services_factory(clear_config_cache: None) -> Iterator[Callable[..., Callable[[], AppServices]]]:
    """Return a factory building CLI services around an injected tool Config.

    Production adapters are kept for storage and display so commands read
    and write real files (use ``tmp_path``) and print to stdout. Logging
    starts a lib_log_rich runtime whose console writes into a buffer, since
    commands bind logging context; it is shut down after the test. Keyword
    arguments replace any further service.

    Example:
        def test_get(cli_runner, services_factory, tmp_path) -> None:
            factory = services_factory({"layered_configuration": {"path_separator": "/"}})
            result = cli_runner.invoke(cli, ["get", str(tmp_path), "a/b"], obj=factory)
    """
    import io

    import lib_log_rich.runtime

    from layered_configuration.composition import build_production

    def _init_logging_without_console(_config: Config) -> None:
        if lib_log_rich.runtime.is_initialised():
            return
        lib_log_rich.runtime.init(
            lib_log_rich.runtime.RuntimeConfig(
                service="layered_configuration",
                environment="test",
                console_stream="custom",
                console_stream_target=io.StringIO(),
                queue_enabled=False,
            )
        )

    def _create(config_data: dict[str, Any] | None = None, **overrides: Any) -> Callable[[], AppServices]:
        config = Config(config_data or {}, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        replacements: dict[str, Any] = {"get_config": _fake_get_config, "init_logging": _init_logging_without_console}
        replacements.update(overrides)
        services = replace(build_production(), **replacements)
        return lambda: services

    yield _create

    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def layer_directory(tmp_path: Path) -> Path:
    """Create a directory with three layer files in HJSON and JSON.

    Load order (sorted names) is ``base.hjson``, ``local.json``, ``user.hjson``,
    so the resulting priority is ``user``, ``local``, ``base``.
    """
    directory = tmp_path / "conf"
    directory.mkdir()
    (directory / "base.hjson").write_text(
        "{\n  # shipped defaults\n  server: {\n    host: 0.0.0.0\n    port: 80\n  }\n  debug: false\n  name: base\n}\n",
        encoding="utf-8",
    )
    (directory / "local.json").write_text('{"server": {"port": 8000}, "name": null}', encoding="utf-8")
    (directory / "user.hjson").write_text("{\n  server: {\n    port: 8080\n  }\n}\n", encoding="utf-8")
    (directory / "notes.txt").write_text("ignored", encoding="utf-8")
    return directory


@pytest.fixture
def three_layer_configuration() -> LayeredConfiguration:
    """Return a configuration searched in the order ``three``, ``two``, ``one``."""
    configuration = LayeredConfiguration()
    configuration.add_layer(
        "one",
        {"a": "overwritten again", "d": {"dd": {"ddd3": False}, "dd2": {"dd2d": True}}, "e": "Hurz"},
    )
    configuration.add_layer("two", {"a": "overwritten", "b": 4, "e": None, "f": {"ff": 12}})
    configuration.add_layer("three", {"a": 1, "b": 2, "c": 3, "d": {"dd": {"ddd": True, "ddd2": "Hello World"}}})
    return configuration
