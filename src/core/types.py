"""Shared typed models.

This module defines immutable data models for resolved storage
configuration so engine consumers never observe half-built values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.constants import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_CACHE_SIZE,
    DEFAULT_CREATE_IF_MISSING,
    DEFAULT_MAX_OPEN_FILES,
    DEFAULT_PARANOID_CHECKS,
    DEFAULT_VERIFY_CHECKSUMS,
    DEFAULT_WRITE_BUFFER_SIZE,
)


class CompressionType(Enum):
    """Block compression algorithm keyed by its persistent id."""

    NONE = 0
    SNAPPY = 1

    @property
    def persistent_id(self) -> int:
        return self.value

    @classmethod
    def from_persistent_id(cls, persistent_id: int) -> "CompressionType | None":
        """Return the member for a persistent id, or None when unmapped."""
        for member in cls:
            if member.value == persistent_id:
                return member
        return None


@dataclass(frozen=True)
class EngineOptions:
    """Tuning parameters passed to the key-value engine when a database opens.

    Attributes:
        create_if_missing: Create the database when it does not exist.
        paranoid_checks: Fail aggressively on detected corruption.
        verify_checksums: Verify block checksums on every read.
        compression_type: Block compression algorithm.
        block_size: Approximate uncompressed block size in bytes.
        write_buffer_size: Memtable size in bytes before flushing.
        cache_size: Block cache capacity in bytes.
        max_open_files: Maximum open table files.
    """

    create_if_missing: bool = DEFAULT_CREATE_IF_MISSING
    paranoid_checks: bool = DEFAULT_PARANOID_CHECKS
    verify_checksums: bool = DEFAULT_VERIFY_CHECKSUMS
    compression_type: CompressionType = CompressionType.NONE
    block_size: int = DEFAULT_BLOCK_SIZE
    write_buffer_size: int = DEFAULT_WRITE_BUFFER_SIZE
    cache_size: int = DEFAULT_CACHE_SIZE
    max_open_files: int = DEFAULT_MAX_OPEN_FILES

    def to_dict(self) -> dict[str, object]:
        """Serialize options for display rows."""
        return {
            "create_if_missing": self.create_if_missing,
            "paranoid_checks": self.paranoid_checks,
            "verify_checksums": self.verify_checksums,
            "compression_type": self.compression_type.name,
            "block_size": self.block_size,
            "write_buffer_size": self.write_buffer_size,
            "cache_size": self.cache_size,
            "max_open_files": self.max_open_files,
        }


def default_engine_options() -> EngineOptions:
    """Build the baseline engine options every database starts from."""
    return EngineOptions(
        create_if_missing=DEFAULT_CREATE_IF_MISSING,
        paranoid_checks=DEFAULT_PARANOID_CHECKS,
        verify_checksums=DEFAULT_VERIFY_CHECKSUMS,
        compression_type=CompressionType.NONE,
        block_size=DEFAULT_BLOCK_SIZE,
        write_buffer_size=DEFAULT_WRITE_BUFFER_SIZE,
        cache_size=DEFAULT_CACHE_SIZE,
        max_open_files=DEFAULT_MAX_OPEN_FILES,
    )


@dataclass(frozen=True)
class StorageProperty:
    """Resolved storage path and engine options for one named database.

    Attributes:
        name: Registry key, unique within one load.
        path: Storage directory, or None when the entry sets no path.
        options: Fully populated engine options.
    """

    name: str
    path: str | None
    options: EngineOptions
