"""Textual sort keys (``field[:asc|desc]``) and the descriptors they describe.

Contents:
    * :class:`SortKey` - parsed field name and direction.
    * :func:`parse_sort_key` - text to SortKey.
    * :func:`field_extractor` - field access for mapping and attribute records.
    * :func:`build_descriptor` - SortKeys to one combined descriptor.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .descriptors import casefold_less_than, combine, lift, make_descriptor, reverse
from .enums import SortDirection
from .errors import InvalidSortKeyError


@dataclass(frozen=True, slots=True)
class SortKey:
    """One field to sort by and the direction to sort it in."""

    field: str
    direction: SortDirection = SortDirection.ASCENDING

    def __str__(self) -> str:
        return f"{self.field}:{self.direction.value}"


def parse_sort_key(text: str) -> SortKey:
    """Parse ``field``, ``field:asc``, ``field:desc`` or ``-field``.

    Args:
        text: Raw key as given on the command line or in configuration.

    Returns:
        Parsed SortKey.

    Raises:
        InvalidSortKeyError: If the field name is empty, the direction unknown,
            or a '-' prefix is combined with a direction suffix.

    Examples:
        >>> parse_sort_key("last_name")
        SortKey(field='last_name', direction=<SortDirection.ASCENDING: 'asc'>)
        >>> str(parse_sort_key("birth_year:desc"))
        'birth_year:desc'
        >>> str(parse_sort_key("-birth_year"))
        'birth_year:desc'
        >>> parse_sort_key("name:up")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidSortKeyError: Invalid sort key 'name:up': direction must be 'asc' or 'desc'
    """
    raw = text.strip()
    direction = SortDirection.ASCENDING

    if raw.startswith("-"):
        raw = raw[1:].strip()
        direction = SortDirection.DESCENDING
        if ":" in raw:
            raise InvalidSortKeyError(
                f"Invalid sort key {text!r}: use either a '-' prefix or a direction suffix, not both"
            )
    elif ":" in raw:
        raw, _, direction_text = raw.partition(":")
        raw = raw.strip()
        try:
            direction = SortDirection(direction_text.strip().lower())
        except ValueError as exc:
            raise InvalidSortKeyError(f"Invalid sort key {text!r}: direction must be 'asc' or 'desc'") from exc

    if not raw:
        raise InvalidSortKeyError(f"Invalid sort key {text!r}: field name is empty")
    return SortKey(field=raw, direction=direction)


def field_extractor(name: str) -> Callable[[Any], Any]:
    """Return a getter for ``name`` that works on mappings and plain objects.

    Missing fields read as ``None``.

    Examples:
        >>> get_year = field_extractor("birth_year")
        >>> get_year({"birth_year": 1980})
        1980
        >>> get_year({}) is None
        True
    """

    def extract(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record.get(name)
        return getattr(record, name, None)

    return extract


def build_descriptor(
    keys: Iterable[SortKey],
    *,
    none_first: bool = True,
    case_insensitive: bool = False,
) -> Callable[[Any, Any], bool]:
    """Build one lexicographic descriptor from sort keys in priority order.

    Each key becomes a descriptor over its field with ``None`` handled by
    :func:`lift`. Descending keys are reversed; ``none_first`` always refers to
    the final output order, regardless of direction.

    Example:
        >>> rows = [{"n": "b", "y": 2}, {"n": "a", "y": 2}, {"n": "c", "y": 1}]
        >>> from sortkit.domain.descriptors import sort_records
        >>> keys = [parse_sort_key("-y"), parse_sort_key("n")]
        >>> [row["n"] for row in sort_records(rows, build_descriptor(keys))]
        ['a', 'b', 'c']
    """
    value_less_than = _value_less_than(case_insensitive)
    descriptors: list[Callable[[Any, Any], bool]] = []
    for key in keys:
        descending = key.direction is SortDirection.DESCENDING
        # reverse() flips the None placement too, so pre-flip it for descending keys.
        lifted = lift(value_less_than, none_first=none_first != descending)
        descriptor = make_descriptor(field_extractor(key.field), lifted)
        descriptors.append(reverse(descriptor) if descending else descriptor)
    return combine(descriptors)


def _value_less_than(case_insensitive: bool) -> Callable[[Any, Any], bool]:
    if not case_insensitive:
        return lambda a, b: a < b

    def less_than(a: Any, b: Any) -> bool:
        if isinstance(a, str) and isinstance(b, str):
            return casefold_less_than(a, b)
        return a < b

    return less_than


__all__ = [
    "SortKey",
    "build_descriptor",
    "field_extractor",
    "parse_sort_key",
]
