"""Shared pytest fixtures for descriptor, record, and CLI tests.

All shared fixtures live here and are picked up through pytest's conftest
discovery. Fixture names read as plain English at the call site.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from sortkit.adapters.memory.records import RecordStore
    from sortkit.composition import AppServices

_COVERAGE_BASENAME = ".coverage.sortkit"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete the coverage database and any SQLite sidecars left by a crashed run."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load a project ``.env`` when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _services_with(**replacements: Any) -> AppServices:
    """Return in-memory services with selected ports replaced."""
    from sortkit.composition import build_testing

    return replace(build_testing(), **replacements)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when parsing JSON so log lines on stderr never mix
    into the parsed output.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real config, real logging)."""
    from sortkit.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory (no filesystem, no logging runtime)."""
    from sortkit.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from Rich output."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
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
    """Clear the get_config cache before the test.

    Only clears before, since a test may monkeypatch the loader away.
    """
    from sortkit.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts without filesystem I/O.

    Example:
        def test_sorting(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"sorting": {"none_position": "last"}})
            assert config.get("sorting.none_position") == "last"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every ``profile`` it receives.

    Example:
        captured: list[str | None] = []
        factory = inject_config_with_profile_capture(config_factory({}), captured)
        cli_runner.invoke(cli, ["--profile", "staging", "config"], obj=factory)
        assert captured == ["staging"]
    """
    from sortkit.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        services = _services_with(get_config=_capturing_get_config, display_config=prod.display_config)
        return lambda: services

    return _inject


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory serving ``config_data`` through the real adapters.

    Config display and ``[sorting]`` validation use the production adapters;
    only the configuration source is replaced.

    Example:
        factory = config_cli_context({"sorting": {"keys": ["-birth_year"]}})
        result = cli_runner.invoke(cli, ["demo"], obj=factory)
    """
    from sortkit.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        services = _services_with(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_sort_settings_from_dict=prod.load_sort_settings_from_dict,
        )
        return lambda: services

    return _create


@dataclass
class SortCliContext:
    """Services factory plus the RecordStore it serves records from."""

    factory: Callable[[], AppServices]
    store: RecordStore


@pytest.fixture
def sort_cli_context() -> Callable[..., SortCliContext]:
    """Create an in-memory sort context holding ``records`` under ``path``.

    Example:
        ctx = sort_cli_context([{"first_name": "Julian"}], config={"sorting": {"none_position": "last"}})
        result = cli_runner.invoke(cli, ["sort", "people.json"], obj=ctx.factory)
        assert ctx.store.loads == [Path("people.json")]
    """
    from sortkit.adapters.memory.records import RecordStore as RecordStoreImpl
    from sortkit.composition import build_testing

    def _create(
        records: list[dict[str, Any]],
        *,
        path: str = "people.json",
        config: dict[str, Any] | None = None,
    ) -> SortCliContext:
        store = RecordStoreImpl()
        store.add(Path(path), records)
        loaded = Config(config or {}, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return loaded

        services = _services_with(
            get_config=_fake_get_config,
            load_records=build_testing(store=store).load_records,
        )
        return SortCliContext(factory=lambda: services, store=store)

    return _create


@pytest.fixture
def people_records() -> list[dict[str, Any]]:
    """The four sample people as plain JSON-style records, in their original order."""
    return [
        {"first_name": "Eduardo", "last_name": "Vaca", "birth_year": 1995},
        {"first_name": "Eduardo", "last_name": "Carax", "birth_year": 2000},
        {"first_name": "Julian", "last_name": "Carax", "birth_year": 1999},
        {"first_name": "Julian", "last_name": "Carax", "birth_year": 1980},
    ]
