"""Type-safe scalar parsing helpers for storage property entries.

This module centralizes primitive conversion so the property builder can
stay concise and produce consistent validation errors for every key.
"""

from __future__ import annotations

import re
from typing import Mapping

from core.constants import INT_MAX, INT_MIN, LONG_MAX, LONG_MIN
from core.errors import FieldTypeError, UnknownEnumValueError
from core.types import CompressionType

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def scalar_text(entry: Mapping[str, object], field_name: str) -> str:
    """Render an entry scalar as configuration text."""
    value = entry[field_name]
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def read_bool(entry: Mapping[str, object], field_name: str) -> bool:
    """Read a boolean field.

    Only the case-insensitive literal ``true`` parses as True. Every other
    text, including malformed values, parses as False.
    """
    return scalar_text(entry, field_name).lower() == "true"


def read_int(entry: Mapping[str, object], field_name: str) -> int:
    """Read a signed 32-bit integer field."""
    return _parse_integer(entry, field_name, INT_MIN, INT_MAX, "Integer")


def read_long(entry: Mapping[str, object], field_name: str) -> int:
    """Read a signed 64-bit integer field."""
    return _parse_integer(entry, field_name, LONG_MIN, LONG_MAX, "Long")


def read_compression_type(entry: Mapping[str, object], field_name: str) -> CompressionType:
    """Read a compression persistent id and resolve it to its enum member.

    Raises:
        FieldTypeError: If the value is not an integer literal.
        UnknownEnumValueError: If no compression type has that id.
    """
    persistent_id = read_int(entry, field_name)
    compression_type = CompressionType.from_persistent_id(persistent_id)
    if compression_type is None:
        supported_ids = tuple(member.persistent_id for member in CompressionType)
        raise UnknownEnumValueError(field_name, persistent_id, supported_ids)
    return compression_type


def _parse_integer(
    entry: Mapping[str, object],
    field_name: str,
    minimum: int,
    maximum: int,
    type_label: str,
) -> int:
    raw_text = scalar_text(entry, field_name)
    if _INTEGER_LITERAL.fullmatch(raw_text) is None:
        raise FieldTypeError(field_name, type_label, raw_text)
    parsed_value = int(raw_text)
    if parsed_value < minimum or parsed_value > maximum:
        raise FieldTypeError(field_name, type_label, raw_text)
    return parsed_value
