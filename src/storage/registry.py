"""Immutable name-to-property registry for configured databases.

The registry is built once from a list of raw entries and then only read.
Lookups for unknown names fall back to defaults instead of failing.
"""

from __future__ import annotations

from pathlib import Path
import shutil
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from core.errors import DuplicateNameError
from core.logging_config import get_logger
from core.types import EngineOptions, StorageProperty, default_engine_options
from storage.property_builder import try_build_property
from storage.results import Rejected, Resolved

_LOGGER = get_logger(__name__)


class StorageRegistry:
    """Read-only lookup of storage paths and engine options by database name."""

    def __init__(
        self,
        properties: Iterable[StorageProperty],
        db_directory: str | None = None,
        index_directory: str | None = None,
    ) -> None:
        property_map: dict[str, StorageProperty] = {}
        for storage_property in properties:
            if storage_property.name in property_map:
                raise DuplicateNameError(storage_property.name)
            property_map[storage_property.name] = storage_property
        self._properties: Mapping[str, StorageProperty] = MappingProxyType(property_map)
        self._db_directory = db_directory
        self._index_directory = index_directory

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Mapping[str, object]],
        db_directory: str | None = None,
        index_directory: str | None = None,
    ) -> "StorageRegistry":
        """Build a registry, raising the first storage configuration error."""
        return build_registry(entries, db_directory, index_directory).unwrap()

    @property
    def db_directory(self) -> str | None:
        return self._db_directory

    @property
    def index_directory(self) -> str | None:
        return self._index_directory

    @property
    def properties(self) -> Mapping[str, StorageProperty]:
        return self._properties

    def names(self) -> tuple[str, ...]:
        """List configured database names in config order."""
        return tuple(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def path_for(self, name: str) -> str | None:
        """Return the configured path, or None for unknown names and unset paths."""
        storage_property = self._properties.get(name)
        if storage_property is None:
            return None
        return storage_property.path

    def options_for(self, name: str) -> EngineOptions:
        """Return configured engine options, or fresh defaults for unknown names."""
        storage_property = self._properties.get(name)
        if storage_property is None:
            return default_engine_options()
        return storage_property.options

    def purge_all_paths(self) -> None:
        """Recursively delete every configured storage directory.

        Destructive and not transactional. Intended for test teardown only;
        never call it while databases under these paths are open. Empty paths
        and paths that no longer exist are skipped; other filesystem errors
        propagate.
        """
        for storage_property in self._properties.values():
            if not storage_property.path:
                continue
            target = Path(storage_property.path)
            if not target.exists():
                continue
            shutil.rmtree(target)
            _LOGGER.info(
                "storage_path_purged",
                name=storage_property.name,
                path=storage_property.path,
            )


RegistryResult = Union[Resolved[StorageRegistry], Rejected]


def build_registry(
    entries: Iterable[Mapping[str, object]],
    db_directory: str | None = None,
    index_directory: str | None = None,
) -> RegistryResult:
    """Resolve every entry and assemble a registry.

    Entries are resolved in order. The first failing entry, or the first
    name already seen, rejects the whole build and no registry is returned.

    Args:
        entries: Raw storage property entries.
        db_directory: Database directory name stored as-is.
        index_directory: Index directory name stored as-is.

    Returns:
        ``Resolved`` with the registry, or ``Rejected`` with the error.
    """
    resolved_properties: list[StorageProperty] = []
    seen_names: set[str] = set()
    for entry in entries:
        result = try_build_property(entry)
        if isinstance(result, Rejected):
            return result
        storage_property = result.value
        if storage_property.name in seen_names:
            return Rejected(DuplicateNameError(storage_property.name))
        seen_names.add(storage_property.name)
        resolved_properties.append(storage_property)
    registry = StorageRegistry(resolved_properties, db_directory, index_directory)
    _LOGGER.info("storage_registry_built", names=list(registry.names()))
    return Resolved(registry)
