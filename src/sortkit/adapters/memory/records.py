"""In-memory record adapters for testing.

Contents:
    * :class:`RecordStore` - Serves records per path and captures load calls.
    * :func:`load_sort_settings_from_dict_in_memory` - Settings loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ...domain.errors import ConfigurationError
from ..records.settings import SortSettings


def _empty_files() -> dict[Path, list[dict[str, Any]]]:
    return {}


def _empty_loads() -> list[Path]:
    return []


@dataclass
class RecordStore:
    """Maps paths to record lists without touching the filesystem.

    Attributes:
        files: Records served per path.
        loads: Paths requested through :meth:`load_records`, in call order.
        raise_exception: When set, :meth:`load_records` raises it.

    Example:
        >>> store = RecordStore()
        >>> store.add(Path("people.json"), [{"first_name": "Julian"}])
        >>> store.load_records(Path("people.json"))
        [{'first_name': 'Julian'}]
        >>> [str(p) for p in store.loads]
        ['people.json']
    """

    files: dict[Path, list[dict[str, Any]]] = field(default_factory=_empty_files)
    loads: list[Path] = field(default_factory=_empty_loads)
    raise_exception: Exception | None = None

    def add(self, path: Path, records: list[dict[str, Any]]) -> None:
        """Register ``records`` under ``path``."""
        self.files[Path(path)] = records

    def clear(self) -> None:
        """Reset stored files and captured calls."""
        self.files.clear()
        self.loads.clear()
        self.raise_exception = None

    def load_records(self, path: Path) -> list[dict[str, Any]]:
        """Return a copy of the records stored under ``path``.

        Raises:
            FileNotFoundError: When nothing was registered under ``path``.
            Exception: If raise_exception is set, raises that exception.
        """
        self.loads.append(Path(path))
        if self.raise_exception is not None:
            raise self.raise_exception
        try:
            return [dict(record) for record in self.files[Path(path)]]
        except KeyError as exc:
            raise FileNotFoundError(str(path)) from exc


def load_sort_settings_from_dict_in_memory(config_dict: Mapping[str, Any]) -> SortSettings:
    """Parse sorting settings from dict using the real Pydantic model.

    Raises:
        ConfigurationError: When the section holds invalid values.
    """
    sorting_raw = config_dict.get("sorting", {})
    try:
        return SortSettings.model_validate(sorting_raw if sorting_raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [sorting] configuration: {exc}") from exc


__all__ = [
    "RecordStore",
    "load_sort_settings_from_dict_in_memory",
]
