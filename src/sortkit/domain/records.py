"""Example record type and ready-made descriptors over it."""

from __future__ import annotations

from dataclasses import dataclass

from .descriptors import make_descriptor


@dataclass(frozen=True, slots=True)
class Person:
    """A person identified by name and birth year.

    Example:
        >>> Person("Julian", "Carax", 1980).last_name
        'Carax'
    """

    first_name: str
    last_name: str
    birth_year: int


SAMPLE_PEOPLE: tuple[Person, ...] = (
    Person(first_name="Eduardo", last_name="Vaca", birth_year=1995),
    Person(first_name="Eduardo", last_name="Carax", birth_year=2000),
    Person(first_name="Julian", last_name="Carax", birth_year=1999),
    Person(first_name="Julian", last_name="Carax", birth_year=1980),
)

by_first_name = make_descriptor(lambda person: person.first_name)
by_last_name = make_descriptor(lambda person: person.last_name)
by_birth_year = make_descriptor(lambda person: person.birth_year)


__all__ = [
    "SAMPLE_PEOPLE",
    "Person",
    "by_birth_year",
    "by_first_name",
    "by_last_name",
]
