"""Core constants used across Keel modules.

This module centralizes configuration keys and engine option defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("keel.yaml")
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")

STORAGE_ROOT_KEY = "storage"
PROPERTIES_KEY = "properties"
DB_DIRECTORY_KEY = "dbDirectory"
INDEX_DIRECTORY_KEY = "indexDirectory"

NAME_KEY = "name"
PATH_KEY = "path"
CREATE_IF_MISSING_KEY = "createIfMissing"
PARANOID_CHECKS_KEY = "paranoidChecks"
VERIFY_CHECKSUMS_KEY = "verifyChecksums"
COMPRESSION_TYPE_KEY = "compressionType"
BLOCK_SIZE_KEY = "blockSize"
WRITE_BUFFER_SIZE_KEY = "writeBufferSize"
CACHE_SIZE_KEY = "cacheSize"
MAX_OPEN_FILES_KEY = "maxOpenFiles"
PROPERTY_ENTRY_KEYS = (
    NAME_KEY,
    PATH_KEY,
    CREATE_IF_MISSING_KEY,
    PARANOID_CHECKS_KEY,
    VERIFY_CHECKSUMS_KEY,
    COMPRESSION_TYPE_KEY,
    BLOCK_SIZE_KEY,
    WRITE_BUFFER_SIZE_KEY,
    CACHE_SIZE_KEY,
    MAX_OPEN_FILES_KEY,
)

DEFAULT_CREATE_IF_MISSING = True
DEFAULT_PARANOID_CHECKS = True
DEFAULT_VERIFY_CHECKSUMS = True
DEFAULT_BLOCK_SIZE = 10 * 1024 * 1024
DEFAULT_WRITE_BUFFER_SIZE = 10 * 1024 * 1024
DEFAULT_CACHE_SIZE = 0
DEFAULT_MAX_OPEN_FILES = 32

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
