"""Glue between YAML storage settings and registry construction."""

from __future__ import annotations

from pathlib import Path

from core.errors import StorageConfigError
from core.storage_config import StorageSettings, load_storage_settings
from storage.registry import RegistryResult, build_registry
from storage.results import Rejected


def build_registry_from_settings(settings: StorageSettings) -> RegistryResult:
    """Build a registry from already-validated storage settings."""
    return build_registry(
        settings.entries,
        db_directory=settings.db_directory,
        index_directory=settings.index_directory,
    )


def load_registry(config_path: str | Path) -> RegistryResult:
    """Load storage settings from disk and build a registry.

    Structural file errors are reported as ``Rejected`` like entry errors.
    """
    try:
        settings = load_storage_settings(config_path)
    except StorageConfigError as error:
        return Rejected(error)
    return build_registry_from_settings(settings)
