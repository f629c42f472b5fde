"""Unit tests for building storage properties from entries."""

from __future__ import annotations

import os

import pytest

from core.errors import (
    FieldTypeError,
    MissingFieldError,
    PathPermissionError,
    PathUnavailableError,
    UnknownEnumValueError,
)
from core.types import CompressionType, default_engine_options
from storage.property_builder import build_property, try_build_property
from storage.results import Rejected, Resolved


def test_build_property_name_only_uses_default_options() -> None:
    """Entry with only a name should resolve to defaults and no path."""
    storage_property = build_property({"name": "block"})

    assert (
        storage_property.name == "block"
        and storage_property.path is None
        and storage_property.options == default_engine_options()
    )


def test_build_property_missing_name_raises_error() -> None:
    """Entries without a name should fail before any other check."""
    with pytest.raises(MissingFieldError) as error_info:
        build_property({"blockSize": "abc"})

    assert error_info.value.field_name == "name"


def test_build_property_empty_name_raises_error() -> None:
    """Blank names should be treated as missing."""
    with pytest.raises(MissingFieldError):
        build_property({"name": ""})
    assert True


def test_build_property_creates_missing_directory(tmp_path) -> None:
    """Absent storage directories should be created with parents."""
    target = tmp_path / "nested" / "acct"

    storage_property = build_property({"name": "account", "path": str(target)})

    assert target.is_dir() and storage_property.path == str(target)


def test_build_property_path_under_file_raises_unavailable(tmp_path) -> None:
    """Paths that cannot be created should fail as unavailable."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(PathUnavailableError) as error_info:
        build_property({"name": "account", "path": str(blocker / "acct")})

    assert error_info.value.path == str(blocker / "acct")


def test_build_property_path_pointing_at_file_raises_unavailable(tmp_path) -> None:
    """Existing non-directory paths should fail as unavailable."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(PathUnavailableError):
        build_property({"name": "account", "path": str(blocker)})
    assert True


def test_build_property_unwritable_directory_raises_permission_error(
    tmp_path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Existing directories without write access should be rejected."""
    target = tmp_path / "readonly"
    target.mkdir()
    monkeypatch.setattr(
        "storage.property_builder.os.access",
        lambda path, mode: mode != os.W_OK,
    )

    with pytest.raises(PathPermissionError) as error_info:
        build_property({"name": "account", "path": str(target)})

    assert error_info.value.path == str(target)


def test_build_property_applies_every_override(tmp_path) -> None:
    """Present keys should overwrite their defaults after conversion."""
    storage_property = build_property(
        {
            "name": "account",
            "createIfMissing": "false",
            "paranoidChecks": "FALSE",
            "verifyChecksums": "nope",
            "compressionType": "1",
            "blockSize": "4096",
            "writeBufferSize": 65536,
            "cacheSize": "8589934592",
            "maxOpenFiles": "100",
        }
    )
    options = storage_property.options

    assert (
        options.create_if_missing is False
        and options.paranoid_checks is False
        and options.verify_checksums is False
        and options.compression_type is CompressionType.SNAPPY
        and options.block_size == 4096
        and options.write_buffer_size == 65536
        and options.cache_size == 8589934592
        and options.max_open_files == 100
    )


def test_build_property_partial_overrides_keep_other_defaults() -> None:
    """Omitted optional keys should keep their default values."""
    options = build_property({"name": "account", "maxOpenFiles": 64}).options
    defaults = default_engine_options()

    assert options.max_open_files == 64 and options.block_size == defaults.block_size


def test_build_property_null_values_count_as_absent() -> None:
    """Explicit nulls should resolve to defaults."""
    storage_property = build_property({"name": "account", "path": None, "cacheSize": None})

    assert storage_property.path is None and storage_property.options.cache_size == 0


def test_build_property_invalid_block_size_names_key() -> None:
    """Non-integer block size should fail naming blockSize."""
    with pytest.raises(FieldTypeError) as error_info:
        build_property({"name": "account", "blockSize": "abc"})

    assert error_info.value.field_name == "blockSize" and "Integer" in str(error_info.value)


def test_build_property_compression_checked_before_sizes() -> None:
    """With several invalid keys the compression error should surface first."""
    with pytest.raises(UnknownEnumValueError):
        build_property({"name": "account", "blockSize": "abc", "compressionType": "7"})
    assert True


def test_build_property_path_checked_before_options(tmp_path) -> None:
    """Path failures should surface before option conversion errors."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(PathUnavailableError):
        build_property({"name": "account", "path": str(blocker), "blockSize": "abc"})
    assert True


def test_try_build_property_returns_resolved_value() -> None:
    """Successful builds should be wrapped as resolved results."""
    result = try_build_property({"name": "block"})

    assert isinstance(result, Resolved) and result.ok and result.unwrap().name == "block"


def test_try_build_property_returns_rejected_error() -> None:
    """Failed builds should be wrapped instead of raised."""
    result = try_build_property({"name": "account", "cacheSize": "lots"})

    assert isinstance(result, Rejected) and not result.ok
    assert isinstance(result.error, FieldTypeError) and result.error.field_name == "cacheSize"


def test_build_property_empty_path_raises_unavailable(tmp_path, monkeypatch) -> None:
    """Empty paths should be rejected instead of resolving to the working directory."""
    monkeypatch.chdir(tmp_path)

    with pytest.raises(PathUnavailableError) as error_info:
        build_property({"name": "account", "path": ""})

    assert error_info.value.path == "" and "empty path" in str(error_info.value)
