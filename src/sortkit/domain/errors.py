"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[sorting]`` section holds values that fail validation.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from sortkit.domain.errors import ConfigurationError
        >>> err = ConfigurationError("sorting.none_position must be 'first' or 'last'")
        >>> str(err)
        "sorting.none_position must be 'first' or 'last'"
    """


class InvalidSortKeyError(ValueError):
    """A textual sort key could not be parsed.

    Inherits from ValueError so generic ``except ValueError`` handlers catch it.

    Example:
        >>> err = InvalidSortKeyError("Invalid sort key 'name:up'")
        >>> isinstance(err, ValueError)
        True
    """


class RecordFormatError(ValueError):
    """Record input is not a sequence of field mappings.

    Example:
        >>> str(RecordFormatError("expected a JSON array"))
        'expected a JSON array'
    """


__all__ = [
    "ConfigurationError",
    "InvalidSortKeyError",
    "RecordFormatError",
]
