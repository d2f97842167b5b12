"""Domain enum tests: member values and lookups from configuration text."""

from __future__ import annotations

import pytest

from sortkit.domain.enums import NonePosition, OutputFormat, SortDirection


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
        (SortDirection.ASCENDING, "asc"),
        (SortDirection.DESCENDING, "desc"),
        (NonePosition.FIRST, "first"),
        (NonePosition.LAST, "last"),
    ],
)
def test_enum_members_equal_their_text(member: str, expected_value: str) -> None:
    assert member == expected_value


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("enum_type", "count"),
    [
        (OutputFormat, 2),
        (SortDirection, 2),
        (NonePosition, 2),
    ],
)
def test_enum_member_counts(enum_type: type, count: int) -> None:
    assert len(list(enum_type)) == count


@pytest.mark.os_agnostic
def test_unknown_direction_is_rejected() -> None:
    with pytest.raises(ValueError):
        SortDirection("sideways")
