"""Records adapter - JSON record input/output and sorting settings.

Contents:
    * :mod:`.source` - JSON array-of-objects loading and dumping via orjson
    * :mod:`.settings` - ``[sorting]`` configuration model
"""

from __future__ import annotations

from .settings import DEFAULT_SORT_KEYS, SortSettings, load_sort_settings_from_dict
from .source import dump_records, load_records, parse_records

__all__ = [
    "DEFAULT_SORT_KEYS",
    "SortSettings",
    "dump_records",
    "load_records",
    "load_sort_settings_from_dict",
    "parse_records",
]
