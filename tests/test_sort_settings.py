"""``[sorting]`` configuration model: defaults, coercion, and validation errors."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from sortkit.adapters.memory.records import load_sort_settings_from_dict_in_memory
from sortkit.adapters.records.settings import DEFAULT_SORT_KEYS, SortSettings, load_sort_settings_from_dict
from sortkit.domain.enums import NonePosition, SortDirection
from sortkit.domain.errors import ConfigurationError
from sortkit.domain.keys import SortKey


@pytest.mark.os_agnostic
def test_defaults_sort_by_names_then_birth_year_with_none_first() -> None:
    settings = SortSettings()

    assert tuple(settings.keys) == DEFAULT_SORT_KEYS
    assert settings.none_position is NonePosition.FIRST
    assert settings.none_first is True
    assert settings.case_insensitive is False


@pytest.mark.os_agnostic
def test_sort_keys_parses_every_configured_key() -> None:
    settings = SortSettings(keys=["last_name", "birth_year:desc"])

    assert settings.sort_keys() == [
        SortKey("last_name", SortDirection.ASCENDING),
        SortKey("birth_year", SortDirection.DESCENDING),
    ]


@pytest.mark.os_agnostic
def test_comma_separated_keys_from_environment_are_split() -> None:
    settings = SortSettings.model_validate({"keys": "last_name, -birth_year"})

    assert settings.keys == ["last_name", "-birth_year"]


@pytest.mark.os_agnostic
def test_invalid_key_is_rejected() -> None:
    with pytest.raises(ValidationError, match="direction must be"):
        SortSettings(keys=["last_name:sideways"])


@pytest.mark.os_agnostic
def test_settings_are_frozen() -> None:
    settings = SortSettings()

    with pytest.raises(ValidationError):
        settings.case_insensitive = True  # type: ignore[misc]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("config", "none_first"),
    [
        ({}, True),
        ({"sorting": {}}, True),
        ({"sorting": {"none_position": "first"}}, True),
        ({"sorting": {"none_position": "last"}}, False),
    ],
)
def test_load_sort_settings_reads_none_position(config: dict[str, Any], none_first: bool) -> None:
    assert load_sort_settings_from_dict(config).none_first is none_first


@pytest.mark.os_agnostic
def test_load_sort_settings_reads_case_insensitive_flag() -> None:
    settings = load_sort_settings_from_dict({"sorting": {"case_insensitive": True}})

    assert settings.case_insensitive is True


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "sorting",
    [
        {"none_position": "middle"},
        {"keys": ["-"]},
        {"case_insensitive": "sometimes"},
    ],
)
def test_load_sort_settings_wraps_validation_errors(sorting: dict[str, Any]) -> None:
    with pytest.raises(ConfigurationError, match=r"Invalid \[sorting\] configuration"):
        load_sort_settings_from_dict({"sorting": sorting})


@pytest.mark.os_agnostic
def test_in_memory_loader_matches_production_loader() -> None:
    config = {"sorting": {"keys": ["-birth_year"], "none_position": "last"}}

    assert load_sort_settings_from_dict_in_memory(config) == load_sort_settings_from_dict(config)


@pytest.mark.os_agnostic
def test_in_memory_loader_wraps_validation_errors() -> None:
    with pytest.raises(ConfigurationError, match=r"Invalid \[sorting\] configuration"):
        load_sort_settings_from_dict_in_memory({"sorting": {"none_position": "middle"}})
