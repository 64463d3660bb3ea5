"""CLI stories for the layer directory commands: layers, get, has, show, set, unset."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import orjson
import pytest
from click.testing import CliRunner, Result

from layered_configuration.adapters.cli import ExitCode, cli
from layered_configuration.adapters.codec import HjsonCodec
from layered_configuration.composition import AppServices

ServicesFactory = Callable[..., Callable[[], AppServices]]


@pytest.fixture
def invoke(cli_runner: CliRunner, services_factory: ServicesFactory) -> Callable[..., Result]:
    """Run ``layconf`` with file-backed services and optional tool settings."""

    def _invoke(*args: str, settings: dict[str, object] | None = None) -> Result:
        config_data = {"layered_configuration": settings} if settings is not None else None
        return cli_runner.invoke(cli, list(args), obj=services_factory(config_data))

    return _invoke


def _read_hjson(path: Path) -> object:
    return HjsonCodec().decode(path.read_text(encoding="utf-8"))


# ======================== layers ========================


@pytest.mark.os_agnostic
def test_layers_lists_names_highest_priority_first(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("layers", str(layer_directory))

    assert result.exit_code == 0
    assert result.output.splitlines() == ["user", "local", "base"]


@pytest.mark.os_agnostic
def test_layers_with_env_puts_environment_layer_on_top(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("layers", str(layer_directory), "--env", settings={"environment_layer": "shell"})

    assert result.exit_code == 0
    assert result.output.splitlines() == ["shell", "user", "local", "base"]


@pytest.mark.os_agnostic
def test_missing_directory_is_a_usage_error(invoke: Callable[..., Result], tmp_path: Path) -> None:
    result = invoke("layers", str(tmp_path / "missing"))

    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_broken_layer_file_exits_with_config_error(invoke: Callable[..., Result], layer_directory: Path) -> None:
    (layer_directory / "zzz.json").write_text("{broken", encoding="utf-8")

    result = invoke("layers", str(layer_directory))

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "cannot parse configuration file" in result.output


@pytest.mark.os_agnostic
def test_invalid_tool_settings_exit_with_config_error(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("layers", str(layer_directory), settings={"path_separator": ""})

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "path_separator" in result.output


# ======================== get ========================


@pytest.mark.os_agnostic
def test_get_prints_the_highest_priority_value(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("get", str(layer_directory), "server.port")

    assert result.exit_code == 0
    assert result.output == "8080\n"


@pytest.mark.os_agnostic
def test_get_prints_strings_bare_and_branches_as_hjson(invoke: Callable[..., Result], layer_directory: Path) -> None:
    host = invoke("get", str(layer_directory), "server.host")
    branch = invoke("get", str(layer_directory), "server")

    assert host.output == "0.0.0.0\n"
    assert HjsonCodec().decode(branch.output) == {"port": 8080}


@pytest.mark.os_agnostic
def test_get_merged_combines_the_branch_across_layers(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("get", str(layer_directory), "server", "--merged", "--format", "json")

    assert result.exit_code == 0
    assert orjson.loads(result.output) == {"host": "0.0.0.0", "port": 8080}


@pytest.mark.os_agnostic
def test_get_stored_null_unless_nulls_are_ignored(invoke: Callable[..., Result], layer_directory: Path) -> None:
    stored = invoke("get", str(layer_directory), "name")
    ignored = invoke("get", str(layer_directory), "name", "--ignore-nulls")

    assert stored.output == "null\n"
    assert ignored.output == "base\n"


@pytest.mark.os_agnostic
def test_get_restricted_to_layers_searches_them_in_the_given_order(
    invoke: Callable[..., Result], layer_directory: Path
) -> None:
    only_base = invoke("get", str(layer_directory), "server.port", "--layer", "base")
    local_first = invoke("get", str(layer_directory), "server.port", "--layer", "local", "--layer", "base")
    base_first = invoke("get", str(layer_directory), "server.port", "--layer", "base", "--layer", "local")

    assert only_base.output == "80\n"
    assert local_first.output == "8000\n"
    assert base_first.output == "80\n"


@pytest.mark.os_agnostic
def test_get_of_undefined_path_exits_with_not_defined(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("get", str(layer_directory), "server.missing")

    assert result.exit_code == ExitCode.NOT_DEFINED
    assert result.output == ""


@pytest.mark.os_agnostic
def test_get_json_format_quotes_strings(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("get", str(layer_directory), "server.host", "--format", "JSON")

    assert result.exit_code == 0
    assert result.output == '"0.0.0.0"\n'


@pytest.mark.os_agnostic
def test_get_uses_the_configured_path_separator(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("get", str(layer_directory), "server/port", settings={"path_separator": "/"})

    assert result.exit_code == 0
    assert result.output == "8080\n"


@pytest.mark.os_agnostic
def test_get_path_separator_can_be_set_on_the_command_line(
    cli_runner: CliRunner, services_factory: ServicesFactory, layer_directory: Path
) -> None:
    args = ["--set", "layered_configuration.path_separator=::", "get", str(layer_directory), "server::port"]

    result = cli_runner.invoke(cli, args, obj=services_factory())

    assert result.exit_code == 0
    assert result.output == "8080\n"


@pytest.mark.os_agnostic
def test_get_with_env_reads_matching_variables(
    invoke: Callable[..., Result], layer_directory: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LCTEST__SERVER__PORT", "9999")
    settings: dict[str, object] = {"environment_match": "^LCTEST__", "environment_separator": "__"}

    with_env = invoke("get", str(layer_directory), "lctest.server.port", "--env", settings=settings)
    without_env = invoke("get", str(layer_directory), "lctest.server.port", settings=settings)

    assert with_env.output == "9999\n"
    assert without_env.exit_code == ExitCode.NOT_DEFINED


@pytest.mark.os_agnostic
def test_load_environment_setting_adds_the_layer_without_flag(
    invoke: Callable[..., Result], layer_directory: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LCTEST_NAME", "from env")
    settings: dict[str, object] = {"load_environment": True, "environment_match": "^LCTEST_NAME$"}

    result = invoke("get", str(layer_directory), "lctest_name", settings=settings)

    assert result.output == "from env\n"


# ======================== has ========================


@pytest.mark.os_agnostic
def test_has_prints_true_for_defined_paths(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("has", str(layer_directory), "server.host")

    assert result.exit_code == 0
    assert result.output == "true\n"


@pytest.mark.os_agnostic
def test_has_prints_false_and_exits_one_for_undefined_paths(
    invoke: Callable[..., Result], layer_directory: Path
) -> None:
    result = invoke("has", str(layer_directory), "server.host", "--layer", "user")

    assert result.exit_code == ExitCode.NOT_DEFINED
    assert result.output == "false\n"


@pytest.mark.os_agnostic
def test_has_with_ignored_nulls_rejects_a_layer_holding_only_null(
    invoke: Callable[..., Result], layer_directory: Path
) -> None:
    result = invoke("has", str(layer_directory), "name", "--ignore-nulls", "--layer", "local")

    assert result.exit_code == ExitCode.NOT_DEFINED


# ======================== show ========================


@pytest.mark.os_agnostic
def test_show_json_prints_the_merged_document(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("show", str(layer_directory), "--format", "json")

    assert result.exit_code == 0
    assert orjson.loads(result.output) == {
        "server": {"host": "0.0.0.0", "port": 8080},
        "debug": False,
        "name": None,
    }


@pytest.mark.os_agnostic
def test_show_human_names_the_layers(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("show", str(layer_directory), "--layer", "base")

    header, _, body = result.output.partition("\n")
    assert header == "# layers: base"
    assert HjsonCodec().decode(body) == {"server": {"host": "0.0.0.0", "port": 80}, "debug": False, "name": "base"}


# ======================== set ========================


@pytest.mark.os_agnostic
def test_set_writes_into_the_file_of_the_layer(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("set", str(layer_directory), "server.port=9000", "--layer", "user")

    assert result.exit_code == 0
    assert result.output == "server.port set in user.hjson\n"
    assert _read_hjson(layer_directory / "user.hjson") == {"server": {"port": 9000}}
    assert invoke("get", str(layer_directory), "server.port").output == "9000\n"


@pytest.mark.os_agnostic
def test_set_into_a_json_layer_keeps_json(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("set", str(layer_directory), "server.hosts=[\"a\", \"b\"]", "--layer", "local")

    assert result.exit_code == 0
    assert orjson.loads((layer_directory / "local.json").read_bytes()) == {
        "server": {"port": 8000, "hosts": ["a", "b"]},
        "name": None,
    }


@pytest.mark.os_agnostic
def test_set_writes_back_into_a_dotted_file_name(invoke: Callable[..., Result], tmp_path: Path) -> None:
    (tmp_path / "app.local.hjson").write_text("{\n  port: 1\n}\n", encoding="utf-8")

    result = invoke("set", str(tmp_path), "port=2", "--layer", "app_local")

    assert result.exit_code == 0
    assert result.output == "port set in app.local.hjson\n"
    assert _read_hjson(tmp_path / "app.local.hjson") == {"port": 2}
    assert not (tmp_path / "app_local.hjson").exists()


@pytest.mark.os_agnostic
def test_set_into_a_new_layer_creates_its_hjson_file(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("set", str(layer_directory), "feature.enabled=true", "--layer", "runtime")

    assert result.exit_code == 0
    assert _read_hjson(layer_directory / "runtime.hjson") == {"feature": {"enabled": True}}
    assert invoke("layers", str(layer_directory)).output.splitlines() == ["user", "runtime", "local", "base"]


@pytest.mark.os_agnostic
def test_set_leaves_other_layer_files_untouched(invoke: Callable[..., Result], layer_directory: Path) -> None:
    before = (layer_directory / "base.hjson").read_text(encoding="utf-8")

    invoke("set", str(layer_directory), "debug=true", "--layer", "user")

    assert (layer_directory / "base.hjson").read_text(encoding="utf-8") == before


@pytest.mark.os_agnostic
def test_set_with_string_flag_skips_json_parsing(invoke: Callable[..., Result], layer_directory: Path) -> None:
    invoke("set", str(layer_directory), "version=1.0", "--layer", "user", "--string")

    assert invoke("get", str(layer_directory), "version", "--format", "json").output == '"1.0"\n'


@pytest.mark.os_agnostic
def test_set_without_equals_sign_is_a_usage_error(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("set", str(layer_directory), "server.port", "--layer", "user")

    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_set_with_path_of_only_separators_is_rejected(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("set", str(layer_directory), "..=1", "--layer", "user")

    assert result.exit_code == ExitCode.INVALID_ARGUMENT


@pytest.mark.os_agnostic
def test_set_requires_a_layer(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("set", str(layer_directory), "a=1")

    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_set_with_blank_layer_is_rejected(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("set", str(layer_directory), "a=1", "--layer", " ")

    assert result.exit_code == ExitCode.INVALID_ARGUMENT


# ======================== unset ========================


@pytest.mark.os_agnostic
def test_unset_removes_the_node_and_reveals_lower_layers(invoke: Callable[..., Result], layer_directory: Path) -> None:
    result = invoke("unset", str(layer_directory), "server.port", "--layer", "user")

    assert result.exit_code == 0
    assert result.output == "server.port removed from user.hjson\n"
    assert _read_hjson(layer_directory / "user.hjson") == {"server": {}}
    assert invoke("get", str(layer_directory), "server.port").output == "8000\n"


@pytest.mark.os_agnostic
def test_unset_of_unknown_layer_exits_with_file_not_found(
    invoke: Callable[..., Result], layer_directory: Path
) -> None:
    result = invoke("unset", str(layer_directory), "server.port", "--layer", "ghost")

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert not (layer_directory / "ghost.hjson").exists()
