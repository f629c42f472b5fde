"""Public SDK surface for Keel.

This module provides a stable import path for storage config consumers.
It re-exports the registry, its builders and typed option models.
"""

from __future__ import annotations

from core.config import KeelConfig
from core.errors import (
    DuplicateNameError,
    FieldTypeError,
    MissingFieldError,
    PathPermissionError,
    PathUnavailableError,
    RegistryNotBuiltError,
    StorageConfigError,
    UnknownEnumValueError,
)
from core.storage_config import StorageSettings, load_storage_settings
from core.types import CompressionType, EngineOptions, StorageProperty, default_engine_options
from storage.loader import build_registry_from_settings, load_registry
from storage.property_builder import build_property, try_build_property
from storage.registry import StorageRegistry, build_registry
from storage.registry_holder import RegistryHolder
from storage.results import Rejected, Resolved

__all__ = [
    "CompressionType",
    "DuplicateNameError",
    "EngineOptions",
    "FieldTypeError",
    "KeelConfig",
    "MissingFieldError",
    "PathPermissionError",
    "PathUnavailableError",
    "RegistryHolder",
    "RegistryNotBuiltError",
    "Rejected",
    "Resolved",
    "StorageConfigError",
    "StorageProperty",
    "StorageRegistry",
    "StorageSettings",
    "UnknownEnumValueError",
    "build_property",
    "build_registry",
    "build_registry_from_settings",
    "default_engine_options",
    "load_registry",
    "load_storage_settings",
    "try_build_property",
]
