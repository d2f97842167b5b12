"""CLI config stories: display, JSON format, sections, profiles, ``--set`` overrides, and loader checks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from sortkit.adapters import cli as cli_mod
from sortkit.adapters.config.loader import get_config, get_default_config_path

# ======================== config display ========================


@pytest.mark.os_agnostic
def test_config_shows_bundled_sorting_defaults(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "sorting"], obj=production_factory)

    assert result.exit_code == 0
    assert "none_position" in result.stdout


@pytest.mark.os_agnostic
def test_config_json_format_outputs_json(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"sorting": {"keys": ["last_name"], "none_position": "last"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    assert '"none_position"' in result.stdout
    assert '"last"' in result.stdout


@pytest.mark.os_agnostic
def test_config_human_format_shows_sections(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"sorting": {"keys": ["last_name", "-birth_year"], "case_insensitive": True}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "[sorting]" in result.output
    assert "-birth_year" in result.output
    assert "case_insensitive = true" in result.output


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", ["human", "json"])
def test_config_unknown_section_exits_with_code_22(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
    output_format: str,
) -> None:
    factory = config_cli_context({"sorting": {}})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", output_format, "--section", "nonexistent"], obj=factory
    )

    assert result.exit_code == 22
    assert "not found" in result.stderr


# ======================== profiles ========================


@pytest.mark.os_agnostic
def test_root_profile_reaches_get_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"sorting": {}}), captured)

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "config"], obj=factory)

    assert result.exit_code == 0
    assert captured == ["staging"]


@pytest.mark.os_agnostic
def test_subcommand_profile_reloads_configuration(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"sorting": {}}), captured)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "production"], obj=factory)

    assert result.exit_code == 0
    assert captured == [None, "production"]


@pytest.mark.os_agnostic
def test_subcommand_profile_reload_keeps_root_set_overrides(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"sorting": {"none_position": "first"}}), captured)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "sorting.none_position=last", "config", "--profile", "production", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert '"none_position": "last"' in result.stdout


# ======================== --set overrides ========================


@pytest.mark.os_agnostic
def test_set_overrides_are_visible_in_config_output(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"sorting": {"none_position": "first", "case_insensitive": False}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        [
            "--set",
            "sorting.none_position=last",
            "--set",
            "sorting.case_insensitive=true",
            "config",
            "--format",
            "json",
            "--section",
            "sorting",
        ],
        obj=factory,
    )

    assert result.exit_code == 0
    assert '"last"' in result.stdout
    assert "true" in result.stdout


@pytest.mark.os_agnostic
def test_malformed_set_override_is_a_usage_error(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({})

    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", "sorting", "config"], obj=factory)

    assert result.exit_code == 2
    assert "must contain '='" in result.output or "must contain '='" in (result.stderr or "")


# ======================== loader ========================


@pytest.mark.os_agnostic
def test_default_config_path_points_at_bundled_toml() -> None:
    path = get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_get_config_loads_sorting_defaults(clear_config_cache: None) -> None:
    config = get_config()

    assert config.get("sorting.none_position", default=None) in {"first", "last"}


@pytest.mark.os_agnostic
def test_get_config_caches_per_profile(clear_config_cache: None) -> None:
    assert get_config() is get_config()


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "foo/bar", ".."])
def test_get_config_rejects_unsafe_profile_names(clear_config_cache: None, profile: str) -> None:
    with pytest.raises(ValueError, match="profile"):
        get_config(profile=profile)


@pytest.mark.os_agnostic
def test_get_config_accepts_plain_profile_names(clear_config_cache: None) -> None:
    assert isinstance(get_config(profile="staging-v2"), Config)
