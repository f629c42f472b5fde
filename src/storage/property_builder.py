"""Build one database's storage property from a raw config entry.

Validation runs in a fixed order so the first reported error is stable
when an entry has several problems: name, path, boolean options,
compression, then sizes.
"""

from __future__ import annotations

from dataclasses import replace
import os
from pathlib import Path
from typing import Callable, Mapping

from core.constants import (
    BLOCK_SIZE_KEY,
    CACHE_SIZE_KEY,
    COMPRESSION_TYPE_KEY,
    CREATE_IF_MISSING_KEY,
    MAX_OPEN_FILES_KEY,
    NAME_KEY,
    PARANOID_CHECKS_KEY,
    PATH_KEY,
    PROPERTY_ENTRY_KEYS,
    VERIFY_CHECKSUMS_KEY,
    WRITE_BUFFER_SIZE_KEY,
)
from core.errors import (
    MissingFieldError,
    PathPermissionError,
    PathUnavailableError,
    StorageConfigError,
)
from core.logging_config import get_logger
from core.storage_fields import (
    read_bool,
    read_compression_type,
    read_int,
    read_long,
    scalar_text,
)
from core.types import EngineOptions, StorageProperty, default_engine_options
from storage.results import PropertyResult, Rejected, Resolved

_LOGGER = get_logger(__name__)

_BOOLEAN_OPTION_FIELDS = (
    (CREATE_IF_MISSING_KEY, "create_if_missing"),
    (PARANOID_CHECKS_KEY, "paranoid_checks"),
    (VERIFY_CHECKSUMS_KEY, "verify_checksums"),
)
_SIZE_OPTION_FIELDS: tuple[tuple[str, str, Callable[[Mapping[str, object], str], int]], ...] = (
    (BLOCK_SIZE_KEY, "block_size", read_int),
    (WRITE_BUFFER_SIZE_KEY, "write_buffer_size", read_int),
    (CACHE_SIZE_KEY, "cache_size", read_long),
    (MAX_OPEN_FILES_KEY, "max_open_files", read_int),
)


def build_property(entry: Mapping[str, object]) -> StorageProperty:
    """Resolve one storage entry into a property.

    Args:
        entry: Raw mapping of config keys to scalar values.

    Returns:
        Property with a validated path and fully populated options.

    Raises:
        StorageConfigError: One of the storage taxonomy errors for the
            first invalid key.
    """
    name = _resolve_name(entry)
    path = _prepare_storage_path(entry) if _has_value(entry, PATH_KEY) else None
    options = _resolve_options(entry)
    _warn_unknown_keys(entry, name)
    _LOGGER.debug("storage_property_resolved", name=name, path=path)
    return StorageProperty(name=name, path=path, options=options)


def try_build_property(entry: Mapping[str, object]) -> PropertyResult:
    """Resolve one storage entry, returning a result instead of raising."""
    try:
        return Resolved(build_property(entry))
    except StorageConfigError as error:
        return Rejected(error)


def _resolve_name(entry: Mapping[str, object]) -> str:
    if not _has_value(entry, NAME_KEY):
        raise MissingFieldError(NAME_KEY)
    name = scalar_text(entry, NAME_KEY)
    if not name:
        raise MissingFieldError(NAME_KEY)
    return name


def _prepare_storage_path(entry: Mapping[str, object]) -> str:
    path = scalar_text(entry, PATH_KEY)
    if not path:
        raise PathUnavailableError(path, "empty path")
    directory = Path(path)
    if not directory.exists():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise PathUnavailableError(path, error.strerror) from error
        _LOGGER.info("storage_path_created", path=path)
    if not directory.is_dir():
        raise PathUnavailableError(path, "not a directory")
    if not os.access(directory, os.W_OK):
        raise PathPermissionError(path)
    return path


def _resolve_options(entry: Mapping[str, object]) -> EngineOptions:
    overrides: dict[str, object] = {}
    for config_key, option_field in _BOOLEAN_OPTION_FIELDS:
        if _has_value(entry, config_key):
            overrides[option_field] = read_bool(entry, config_key)
    if _has_value(entry, COMPRESSION_TYPE_KEY):
        overrides["compression_type"] = read_compression_type(entry, COMPRESSION_TYPE_KEY)
    for config_key, option_field, reader in _SIZE_OPTION_FIELDS:
        if _has_value(entry, config_key):
            overrides[option_field] = reader(entry, config_key)
    return replace(default_engine_options(), **overrides)


def _has_value(entry: Mapping[str, object], field_name: str) -> bool:
    # explicit YAML nulls count as absent
    return entry.get(field_name) is not None


def _warn_unknown_keys(entry: Mapping[str, object], name: str) -> None:
    unknown_keys = sorted(set(entry) - set(PROPERTY_ENTRY_KEYS))
    if unknown_keys:
        _LOGGER.warning("storage_entry_unknown_keys", name=name, keys=unknown_keys)
