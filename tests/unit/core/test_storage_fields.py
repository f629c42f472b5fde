"""Unit tests for storage scalar field parsing."""

from __future__ import annotations

import pytest

from core.errors import FieldTypeError, UnknownEnumValueError
from core.storage_fields import read_bool, read_compression_type, read_int, read_long
from core.types import CompressionType


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("true", True),
        ("TRUE", True),
        ("True", True),
        (True, True),
        ("false", False),
        (False, False),
        ("yes", False),
        ("1", False),
        (1, False),
        ("", False),
    ],
)
def test_read_bool_only_accepts_literal_true(raw_value: object, expected: bool) -> None:
    """Only case-insensitive 'true' should parse as True; nothing fails."""
    assert read_bool({"flag": raw_value}, "flag") is expected


def test_read_int_parses_string_and_native_values() -> None:
    """Integer literals should parse from YAML strings and ints alike."""
    entry = {"a": "4096", "b": 8192, "c": "-7", "d": "+12"}

    assert [read_int(entry, key) for key in ("a", "b", "c", "d")] == [4096, 8192, -7, 12]


@pytest.mark.parametrize("raw_value", ["abc", "1.5", 1.5, " 10", "10 ", "", "0x10", True])
def test_read_int_rejects_non_integer_literals(raw_value: object) -> None:
    """Non-integer text should raise a field type error naming the key."""
    with pytest.raises(FieldTypeError) as error_info:
        read_int({"blockSize": raw_value}, "blockSize")

    assert error_info.value.field_name == "blockSize"
    assert error_info.value.expected_type == "Integer"


def test_read_int_rejects_values_beyond_32_bits() -> None:
    """Values outside the signed 32-bit range should not parse as Integer."""
    with pytest.raises(FieldTypeError):
        read_int({"maxOpenFiles": "2147483648"}, "maxOpenFiles")
    assert read_int({"maxOpenFiles": "2147483647"}, "maxOpenFiles") == 2147483647


def test_read_long_accepts_values_beyond_32_bits() -> None:
    """Long fields should accept 64-bit values."""
    assert read_long({"cacheSize": "8589934592"}, "cacheSize") == 8589934592


def test_read_long_rejects_overflow_and_reports_long_type() -> None:
    """Values outside signed 64-bit range should fail as Long."""
    with pytest.raises(FieldTypeError) as error_info:
        read_long({"cacheSize": str(2**63)}, "cacheSize")

    assert error_info.value.expected_type == "Long" and "cacheSize" in str(error_info.value)


def test_read_compression_type_maps_persistent_ids() -> None:
    """Known persistent ids should resolve to compression members."""
    assert read_compression_type({"compressionType": "0"}, "compressionType") is (
        CompressionType.NONE
    )
    assert read_compression_type({"compressionType": 1}, "compressionType") is (
        CompressionType.SNAPPY
    )


def test_read_compression_type_rejects_non_integer() -> None:
    """Non-integer compression ids should fail with a field type error."""
    with pytest.raises(FieldTypeError) as error_info:
        read_compression_type({"compressionType": "snappy"}, "compressionType")

    assert error_info.value.field_name == "compressionType"


def test_read_compression_type_rejects_unmapped_id() -> None:
    """Parsable but unmapped ids should fail with an unknown enum error."""
    with pytest.raises(UnknownEnumValueError) as error_info:
        read_compression_type({"compressionType": "9"}, "compressionType")

    assert error_info.value.value == 9 and error_info.value.field_name == "compressionType"
