"""Typed parsing of the YAML storage configuration section.

This module loads the ``storage`` section of a Keel config file and
validates its structure. Entry values stay raw here; the property
builder owns per-key conversion.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import (
    DB_DIRECTORY_KEY,
    INDEX_DIRECTORY_KEY,
    PROPERTIES_KEY,
    STORAGE_ROOT_KEY,
)
from core.errors import StorageConfigError


@dataclass(frozen=True)
class StorageSettings:
    """Validated storage section.

    Attributes:
        db_directory: Database storage directory name, stored unvalidated.
        index_directory: Index storage directory name, stored unvalidated.
        entries: Raw per-database property entries in file order.
    """

    db_directory: str | None
    index_directory: str | None
    entries: tuple[Mapping[str, object], ...]


def load_storage_settings(config_path: str | Path) -> StorageSettings:
    """Load and validate the storage section of a YAML config file.

    Args:
        config_path: File path to YAML config.

    Returns:
        Structurally validated storage settings.

    Raises:
        StorageConfigError: If the file is unreadable or malformed.
    """
    config_file = Path(config_path).expanduser().resolve()
    if not config_file.exists():
        raise StorageConfigError(
            f"Config file does not exist at {config_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise StorageConfigError(
            f"Failed to read config at {config_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise StorageConfigError(
            f"Failed to parse YAML config at {config_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise StorageConfigError(f"Config at {config_file} is empty. Define a 'storage' section.")
    return parse_storage_settings(payload)


def parse_storage_settings(payload: object) -> StorageSettings:
    """Validate an already-parsed config tree into storage settings."""
    root_mapping = _expect_mapping(payload, "config root")
    raw_storage = root_mapping.get(STORAGE_ROOT_KEY)
    if raw_storage is None:
        raise StorageConfigError(
            f"Config missing required section '{STORAGE_ROOT_KEY}'. Add a storage mapping."
        )
    storage_mapping = _expect_mapping(raw_storage, "storage section")
    return StorageSettings(
        db_directory=_optional_string(storage_mapping, DB_DIRECTORY_KEY),
        index_directory=_optional_string(storage_mapping, INDEX_DIRECTORY_KEY),
        entries=_parse_entries(storage_mapping),
    )


def _parse_entries(storage_mapping: Mapping[str, object]) -> tuple[Mapping[str, object], ...]:
    raw_entries = storage_mapping.get(PROPERTIES_KEY)
    if raw_entries is None:
        return ()
    entry_rows = _expect_sequence(raw_entries, "storage.properties")
    parsed_entries = []
    for index, entry_value in enumerate(entry_rows):
        context = f"storage.properties entry #{index + 1}"
        parsed_entries.append(_expect_mapping(entry_value, context))
    return tuple(parsed_entries)


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise StorageConfigError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise StorageConfigError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise StorageConfigError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _optional_string(mapping: Mapping[str, object], field_name: str) -> str | None:
    raw_value = mapping.get(field_name)
    if raw_value is None:
        return None
    if isinstance(raw_value, str):
        return raw_value
    raise StorageConfigError(f"Storage field '{field_name}' must be a string when provided.")
