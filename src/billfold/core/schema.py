#!/usr/bin/env python3
"""
Strict Schema Helpers

Small helpers used by every record's `from_dict`. Records reject unknown keys,
require their mandatory keys, and check scalar types, raising SchemaError with
a message that names the record and field.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from .dates import DateString
from .exceptions import SchemaError


def check_fields(
    data: Any,
    record: str,
    required: Iterable[str],
    optional: Iterable[str] = (),
) -> dict[str, Any]:
    """
    Validate the key set of a mapping.

    Args:
        data: Parsed YAML value
        record: Record name used in error messages
        required: Keys that must be present
        optional: Keys that may be present

    Returns:
        The mapping itself

    Raises:
        SchemaError: If data is not a mapping, a required key is missing,
            or an unknown key is present
    """
    if not isinstance(data, dict):
        raise SchemaError(f"{record}: expected a mapping, got {type(data).__name__}")

    required = list(required)
    allowed = set(required) | set(optional)

    missing = [key for key in required if key not in data]
    if missing:
        raise SchemaError(f"{record}: missing field(s): {', '.join(missing)}")

    unknown = sorted(str(key) for key in data if key not in allowed)
    if unknown:
        raise SchemaError(f"{record}: unknown field(s): {', '.join(unknown)}")

    return data


def get_str(data: dict[str, Any], key: str, record: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise SchemaError(f"{record}.{key}: expected a string, got {value!r}")
    return value


def get_optional_str(data: dict[str, Any], key: str, record: str) -> str | None:
    if data.get(key) is None:
        return None
    return get_str(data, key, record)


def get_int(data: dict[str, Any], key: str, record: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaError(f"{record}.{key}: expected a non-negative integer, got {value!r}")
    return value


def get_number(data: dict[str, Any], key: str, record: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise SchemaError(f"{record}.{key}: expected a non-negative number, got {value!r}")
    return float(value)


def get_list(data: dict[str, Any], key: str, record: str) -> list[Any]:
    value = data[key]
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaError(f"{record}.{key}: expected a list, got {value!r}")
    return value


def get_date(data: dict[str, Any], key: str, record: str) -> DateString:
    """Read a DateString, accepting dates that YAML already parsed natively."""
    value = data[key]
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return DateString.from_date(value)
    try:
        return DateString(value)
    except ValueError as e:
        raise SchemaError(f"{record}.{key}: {e}") from e
