"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` mirrors the signature of the adapter function it
stands for, so module-level functions satisfy them structurally (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``SortSettings``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.records.settings import SortSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadRecords(Protocol):
    """Read the records stored at ``path``."""

    def __call__(self, path: Path) -> list[dict[str, Any]]: ...


class LoadSortSettingsFromDict(Protocol):
    """Load SortSettings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> SortSettings: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadRecords",
    "LoadSortSettingsFromDict",
]
