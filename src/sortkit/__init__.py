"""Public package surface exposing sort descriptors, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Descriptor composition and sort-key parsing
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.descriptors import (
    Descriptor,
    casefold_less_than,
    combine,
    lift,
    make_descriptor,
    reverse,
    sort_key,
    sort_records,
    to_comparison,
)
from .domain.keys import SortKey, build_descriptor, parse_sort_key
from .domain.records import SAMPLE_PEOPLE, Person

__all__ = [
    "Descriptor",
    "Person",
    "SAMPLE_PEOPLE",
    "SortKey",
    "build_descriptor",
    "casefold_less_than",
    "combine",
    "get_config",
    "lift",
    "make_descriptor",
    "parse_sort_key",
    "print_info",
    "reverse",
    "sort_key",
    "sort_records",
    "to_comparison",
]
