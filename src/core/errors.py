"""Keel exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Storage configuration failures carry the offending key so startup
failures can be reported precisely.
"""

from __future__ import annotations

_PROPERTIES_CONTEXT = "[storage.properties]"


class KeelError(Exception):
    """Base exception for all Keel failures."""


class KeelConfigError(KeelError):
    """Raised for invalid runtime configuration."""


class StorageConfigError(KeelError):
    """Raised for invalid storage configuration files or entries."""


class MissingFieldError(StorageConfigError):
    """Raised when a required entry key is absent."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{_PROPERTIES_CONTEXT} database {field_name} must be set.")


class PathUnavailableError(StorageConfigError):
    """Raised when a storage directory cannot be created."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.field_name = "path"
        self.path = path
        detail = f" ({reason})" if reason else ""
        super().__init__(f"{_PROPERTIES_CONTEXT} can not create storage path: {path}{detail}")


class PathPermissionError(StorageConfigError):
    """Raised when a storage directory exists but is not writable."""

    def __init__(self, path: str) -> None:
        self.field_name = "path"
        self.path = path
        super().__init__(f"{_PROPERTIES_CONTEXT} permission denied to write to: {path}")


class FieldTypeError(StorageConfigError):
    """Raised when an entry value cannot be converted to its declared type."""

    def __init__(self, field_name: str, expected_type: str, raw_value: str) -> None:
        self.field_name = field_name
        self.expected_type = expected_type
        self.raw_value = raw_value
        super().__init__(
            f"{_PROPERTIES_CONTEXT} {field_name} must be {expected_type} type, got '{raw_value}'."
        )


class UnknownEnumValueError(StorageConfigError):
    """Raised when a persistent id has no mapped enum member."""

    def __init__(self, field_name: str, value: int, supported_values: tuple[int, ...]) -> None:
        self.field_name = field_name
        self.value = value
        supported_rows = ", ".join(str(item) for item in supported_values)
        super().__init__(
            f"{_PROPERTIES_CONTEXT} unknown {field_name} persistent id {value}. "
            f"Use one of: {supported_rows}."
        )


class DuplicateNameError(StorageConfigError):
    """Raised when two entries declare the same database name."""

    def __init__(self, name: str) -> None:
        self.field_name = "name"
        self.name = name
        super().__init__(f"{_PROPERTIES_CONTEXT} duplicate database name '{name}'.")


class RegistryNotBuiltError(KeelError):
    """Raised when lookups are attempted before a registry is published."""
