"""Sorting configuration model and loader.

Provides the SortSettings Pydantic model for the validated, immutable
``[sorting]`` section and the loader function to create it from
configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sortkit.domain.enums import NonePosition
from sortkit.domain.errors import ConfigurationError, InvalidSortKeyError
from sortkit.domain.keys import SortKey, parse_sort_key

DEFAULT_SORT_KEYS: tuple[str, ...] = ("first_name", "last_name", "birth_year")


class SortSettings(BaseModel):
    """Validated, immutable sorting configuration.

    Example:
        >>> settings = SortSettings(keys=["last_name", "-birth_year"])
        >>> [str(key) for key in settings.sort_keys()]
        ['last_name:asc', 'birth_year:desc']
        >>> SortSettings().none_position
        <NonePosition.FIRST: 'first'>
    """

    model_config = ConfigDict(frozen=True)

    keys: list[str] = Field(default_factory=lambda: list(DEFAULT_SORT_KEYS))
    none_position: NonePosition = NonePosition.FIRST
    case_insensitive: bool = False

    @field_validator("keys", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> Any:
        """Split comma-separated strings from environment variables into lists.

        Examples:
            >>> SortSettings._coerce_string_to_list("last_name, -birth_year")
            ['last_name', '-birth_year']
            >>> SortSettings._coerce_string_to_list("")
            []
        """
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("keys")
    @classmethod
    def _validate_keys(cls, v: list[str]) -> list[str]:
        for raw in v:
            try:
                parse_sort_key(raw)
            except InvalidSortKeyError as exc:
                raise ValueError(str(exc)) from exc
        return v

    @property
    def none_first(self) -> bool:
        return self.none_position is NonePosition.FIRST

    def sort_keys(self) -> list[SortKey]:
        """Return the configured keys parsed into SortKey values."""
        return [parse_sort_key(raw) for raw in self.keys]


def load_sort_settings_from_dict(config_dict: Mapping[str, Any]) -> SortSettings:
    """Load SortSettings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed SortSettings
    model. Single-parse validation at the boundary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'sorting' section.

    Returns:
        Sorting settings with defaults for missing values.

    Raises:
        ConfigurationError: When the section holds invalid values.

    Example:
        >>> settings = load_sort_settings_from_dict({"sorting": {"none_position": "last"}})
        >>> settings.none_first
        False
        >>> load_sort_settings_from_dict({}).keys
        ['first_name', 'last_name', 'birth_year']
    """
    section: Any = config_dict.get("sorting", {})
    if isinstance(section, Mapping):
        section = dict(cast(Mapping[str, Any], section))
    try:
        return SortSettings.model_validate(section if section else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [sorting] configuration: {exc}") from exc


__all__ = [
    "DEFAULT_SORT_KEYS",
    "SortSettings",
    "load_sort_settings_from_dict",
]
