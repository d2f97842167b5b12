"""Domain layer - pure sorting logic with no I/O or framework dependencies.

Contents:
    * :mod:`.descriptors` - Descriptor construction and lexicographic composition
    * :mod:`.keys` - Textual sort keys and the descriptors they build
    * :mod:`.records` - Example ``Person`` record and sample data
    * :mod:`.enums` - Domain enumerations (OutputFormat, SortDirection, NonePosition)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .descriptors import (
    casefold_less_than,
    combine,
    lift,
    make_descriptor,
    reverse,
    sort_key,
    sort_records,
    to_comparison,
)
from .enums import NonePosition, OutputFormat, SortDirection
from .errors import ConfigurationError, InvalidSortKeyError, RecordFormatError
from .keys import SortKey, build_descriptor, field_extractor, parse_sort_key
from .records import SAMPLE_PEOPLE, Person, by_birth_year, by_first_name, by_last_name

__all__ = [
    # Descriptors
    "casefold_less_than",
    "combine",
    "lift",
    "make_descriptor",
    "reverse",
    "sort_key",
    "sort_records",
    "to_comparison",
    # Keys
    "SortKey",
    "build_descriptor",
    "field_extractor",
    "parse_sort_key",
    # Records
    "SAMPLE_PEOPLE",
    "Person",
    "by_birth_year",
    "by_first_name",
    "by_last_name",
    # Enums
    "NonePosition",
    "OutputFormat",
    "SortDirection",
    # Errors
    "ConfigurationError",
    "InvalidSortKeyError",
    "RecordFormatError",
]
