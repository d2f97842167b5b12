"""Sort descriptors: ordering predicates built from extractors and comparators.

A descriptor is a plain callable ``(a, b) -> bool`` answering "must ``a`` sort
before ``b``?". Descriptors are built from a field extractor plus an optional
less-than comparator and composed into a single lexicographic ordering.

Contents:
    * :func:`make_descriptor` - extractor + comparator to descriptor.
    * :func:`combine` - lexicographic composition of several descriptors.
    * :func:`reverse` - descending variant of a descriptor.
    * :func:`lift` - comparator adapter for optional values.
    * :func:`casefold_less_than` - case-insensitive string comparator.
    * :func:`to_comparison` / :func:`sort_key` / :func:`sort_records` - bridges to
      Python's sort machinery.

System Role:
    Pure domain logic. No I/O, no logging, no configuration. Comparators are
    trusted to define a strict weak ordering; violating that contract yields an
    unspecified but non-crashing order.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any, TypeVar

T = TypeVar("T")
V = TypeVar("V")

Descriptor = Callable[[T, T], bool]
"""Binary predicate: ``True`` when the first record sorts before the second."""

Extractor = Callable[[T], V]
"""Projection from a record to a comparable value."""

LessThan = Callable[[V, V], bool]
"""Strict weak ordering over extracted values."""


def make_descriptor(
    extract: Callable[[T], Any],
    less_than: Callable[[Any, Any], bool] | None = None,
) -> Callable[[T, T], bool]:
    """Build a descriptor comparing the values ``extract`` projects out of two records.

    Args:
        extract: Pure function mapping a record to the value to compare.
        less_than: Strict weak ordering over the extracted values. When omitted
            the natural ``<`` relation is used.

    Returns:
        Descriptor ``(a, b) -> less_than(extract(a), extract(b))``.

    Example:
        >>> by_len = make_descriptor(len)
        >>> by_len("ab", "abc"), by_len("abc", "ab")
        (True, False)
        >>> longest_first = make_descriptor(len, lambda x, y: x > y)
        >>> longest_first("abc", "ab")
        True
    """
    compare = less_than if less_than is not None else operator.lt

    def descriptor(a: T, b: T) -> bool:
        return bool(compare(extract(a), extract(b)))

    return descriptor


def combine(descriptors: Iterable[Callable[[T, T], bool]]) -> Callable[[T, T], bool]:
    """Compose descriptors into one lexicographic ordering.

    Each descriptor is probed forward and reverse: the first one that reports
    ``a`` before ``b`` yields ``True``, the first one that reports ``b`` before
    ``a`` yields ``False``. When no descriptor tells the pair apart they are
    equal and the result is ``False``, so a stable sort keeps their order.

    The iterable is materialised once; passing a generator is safe.

    Args:
        descriptors: Primary, secondary, tertiary ... descriptors in priority order.

    Returns:
        The combined descriptor.

    Example:
        >>> pairs = [(2, "b"), (1, "z"), (2, "a")]
        >>> by_num = make_descriptor(lambda p: p[0])
        >>> by_text = make_descriptor(lambda p: p[1])
        >>> sort_records(pairs, combine([by_num, by_text]))
        [(1, 'z'), (2, 'a'), (2, 'b')]
        >>> combine([])(1, 2)
        False
    """
    chain = tuple(descriptors)

    def combined(a: T, b: T) -> bool:
        for descriptor in chain:
            if descriptor(a, b):
                return True
            if descriptor(b, a):
                return False
        return False

    return combined


def reverse(descriptor: Callable[[T, T], bool]) -> Callable[[T, T], bool]:
    """Return the descending counterpart of ``descriptor``.

    Example:
        >>> newest_first = reverse(make_descriptor(int))
        >>> newest_first(2000, 1995)
        True
    """

    def reversed_descriptor(a: T, b: T) -> bool:
        return descriptor(b, a)

    return reversed_descriptor


def lift(
    less_than: Callable[[V, V], bool] | None = None,
    *,
    none_first: bool = True,
) -> Callable[[V | None, V | None], bool]:
    """Adapt a comparator so it also orders ``None``.

    ``None`` compares equal to ``None`` and sorts before every value (or after,
    with ``none_first=False``). Non-``None`` values use ``less_than``, or the
    natural ``<`` when omitted.

    Example:
        >>> lt = lift()
        >>> lt(None, 1), lt(1, None), lt(None, None)
        (True, False, False)
        >>> lift(none_first=False)(None, 1)
        False
    """
    compare = less_than if less_than is not None else operator.lt

    def lifted(a: V | None, b: V | None) -> bool:
        if a is None:
            return none_first and b is not None
        if b is None:
            return not none_first
        return bool(compare(a, b))

    return lifted


def casefold_less_than(a: str, b: str) -> bool:
    """Compare strings ignoring case.

    Example:
        >>> casefold_less_than("apple", "Banana")
        True
        >>> "apple" < "Banana"
        False
    """
    return a.casefold() < b.casefold()


def to_comparison(descriptor: Callable[[T, T], bool]) -> Callable[[T, T], int]:
    """Derive a three-way ``cmp`` function (``-1``/``0``/``1``) from a descriptor.

    Example:
        >>> cmp = to_comparison(make_descriptor(abs))
        >>> cmp(-1, 2), cmp(3, -3), cmp(5, 4)
        (-1, 0, 1)
    """

    def compare(a: T, b: T) -> int:
        if descriptor(a, b):
            return -1
        if descriptor(b, a):
            return 1
        return 0

    return compare


def sort_key(descriptor: Callable[[T, T], bool]) -> Callable[[T], Any]:
    """Wrap a descriptor as a ``key=`` callable for ``sorted`` and ``list.sort``.

    Example:
        >>> sorted(["bb", "a", "ccc"], key=sort_key(reverse(make_descriptor(len))))
        ['ccc', 'bb', 'a']
    """
    return cmp_to_key(to_comparison(descriptor))


def sort_records(records: Iterable[T], descriptor: Callable[[T, T], bool]) -> list[T]:
    """Return a new list of ``records`` stable-sorted by ``descriptor``.

    The input is not modified. Records the descriptor considers equal keep
    their relative order.

    Example:
        >>> sort_records([3, 1, 2], make_descriptor(lambda n: n))
        [1, 2, 3]
    """
    return sorted(records, key=sort_key(descriptor))


__all__ = [
    "Descriptor",
    "Extractor",
    "LessThan",
    "casefold_less_than",
    "combine",
    "lift",
    "make_descriptor",
    "reverse",
    "sort_key",
    "sort_records",
    "to_comparison",
]
