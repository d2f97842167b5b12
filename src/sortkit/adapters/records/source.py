"""Record input and output - JSON arrays of objects via orjson."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, cast

import orjson

from sortkit.domain.errors import RecordFormatError

logger = logging.getLogger(__name__)


def parse_records(payload: bytes | str) -> list[dict[str, Any]]:
    """Parse a JSON document holding an array of objects.

    Args:
        payload: Raw JSON text or bytes.

    Returns:
        The records in document order.

    Raises:
        RecordFormatError: If the payload is not valid JSON, not an array, or
            contains an element that is not an object.

    Examples:
        >>> parse_records('[{"first_name": "Julian"}]')
        [{'first_name': 'Julian'}]
        >>> parse_records('{"first_name": "Julian"}')  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        RecordFormatError: expected a JSON array of objects, got object
    """
    try:
        data: object = orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise RecordFormatError(f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise RecordFormatError(f"expected a JSON array of objects, got {_json_type(data)}")

    records: list[dict[str, Any]] = []
    for index, item in enumerate(cast(list[object], data)):
        if not isinstance(item, dict):
            raise RecordFormatError(f"record {index} is {_json_type(item)}, expected object")
        records.append(cast(dict[str, Any], item))
    return records


def load_records(path: Path) -> list[dict[str, Any]]:
    """Read records from a JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        RecordFormatError: If the file content is not an array of objects.
    """
    records = parse_records(path.read_bytes())
    logger.debug("Loaded records", extra={"path": str(path), "count": len(records)})
    return records


def dump_records(records: Iterable[Any]) -> str:
    """Serialise records (mappings or dataclasses) as indented JSON.

    Example:
        >>> print(dump_records([{"a": 1}]))
        [
          {
            "a": 1
          }
        ]
    """
    return orjson.dumps(list(records), option=orjson.OPT_INDENT_2).decode("utf-8")


def _json_type(value: object) -> str:
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    return "number"


__all__ = [
    "dump_records",
    "load_records",
    "parse_records",
]
