"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.logging.setup import init_logging
from ..adapters.records.settings import load_sort_settings_from_dict
from ..adapters.records.source import load_records

# pyright checks each adapter against its Protocol; nothing runs here at import time.
if TYPE_CHECKING:
    from ..adapters.memory.records import RecordStore
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadRecords,
        LoadSortSettingsFromDict,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_records: LoadRecords = load_records
    _assert_load_sort_settings: LoadSortSettingsFromDict = load_sort_settings_from_dict
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_records: LoadRecords
    load_sort_settings_from_dict: LoadSortSettingsFromDict
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_records=load_records,
        load_sort_settings_from_dict=load_sort_settings_from_dict,
        init_logging=init_logging,
    )


def build_testing(*, store: RecordStore | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        store: Optional RecordStore serving records to ``sort``. When None, a
            fresh empty store is created. Pass your own to register records and
            assert on the paths that were loaded.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        RecordStore,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_sort_settings_from_dict_in_memory,
    )

    record_store = store if store is not None else RecordStore()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_records=record_store.load_records,
        load_sort_settings_from_dict=load_sort_settings_from_dict_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Records
    "load_records",
    "load_sort_settings_from_dict",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
