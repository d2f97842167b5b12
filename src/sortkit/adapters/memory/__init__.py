"""In-memory adapter implementations for testing.

Lightweight implementations of every application port that work entirely in
memory: no filesystem, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.records` - In-memory record adapters (RecordStore class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory
from .records import RecordStore, load_sort_settings_from_dict_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from sortkit.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadRecords,
        LoadSortSettingsFromDict,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_records: LoadRecords = RecordStore().load_records
    _assert_load_sort_settings: LoadSortSettingsFromDict = load_sort_settings_from_dict_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "RecordStore",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_sort_settings_from_dict_in_memory",
]
