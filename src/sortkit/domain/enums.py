"""Type-safe domain enums for output formats and sort options."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration and record display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output (TOML-like config, table of records).
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class SortDirection(str, Enum):
    """Direction a single sort key orders its field in.

    Example:
        >>> SortDirection("desc") is SortDirection.DESCENDING
        True
    """

    ASCENDING = "asc"
    DESCENDING = "desc"


class NonePosition(str, Enum):
    """Where records with a missing or ``None`` field value are placed.

    Example:
        >>> NonePosition.FIRST == "first"
        True
    """

    FIRST = "first"
    LAST = "last"


__all__ = [
    "NonePosition",
    "OutputFormat",
    "SortDirection",
]
