"""Behaviour tests for the CLI context helpers and root group wiring."""

from __future__ import annotations

import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from layered_configuration.adapters import cli as cli_mod
from layered_configuration.adapters.cli.context import CLIContext, get_cli_context, store_cli_context
from layered_configuration.adapters.cli.main import main
from layered_configuration.composition import build_production, build_testing

# ---------------------------------------------------------------------------
# get_cli_context
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    ctx = click.Context(click.Command("test"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_store_and_get_cli_context_round_trip() -> None:
    ctx = click.Context(click.Command("test"))
    services = build_testing()

    store_cli_context(
        ctx,
        traceback=True,
        config=Config({}, {}),
        services=services,
        profile="staging",
        set_overrides=("layered_configuration.path_separator=/",),
    )
    stored = get_cli_context(ctx)

    assert isinstance(stored, CLIContext)
    assert stored.traceback is True
    assert stored.services is services
    assert stored.profile == "staging"
    assert stored.set_overrides == ("layered_configuration.path_separator=/",)


@pytest.mark.os_agnostic
def test_cli_context_defaults_to_no_profile_and_no_overrides() -> None:
    ctx = click.Context(click.Command("test"))

    store_cli_context(ctx, traceback=False, config=Config({}, {}), services=build_testing())

    assert get_cli_context(ctx).profile is None
    assert get_cli_context(ctx).set_overrides == ()


# ---------------------------------------------------------------------------
# root group and main()
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_cli_root_fails_when_obj_is_not_a_factory(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_main_returns_nonzero_for_overrides_without_section(managed_traceback_state: None) -> None:
    exit_code = main(["--set", "invalid_no_dot=value", "info"], services_factory=build_production)

    assert exit_code != 0
