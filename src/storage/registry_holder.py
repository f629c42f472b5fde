"""Publication point for the active storage registry.

Components receive a holder explicitly instead of reading a global. A
reload builds a complete new registry before swapping the reference, so
readers see either the old or the new registry and never a mix.
"""

from __future__ import annotations

from pathlib import Path
import threading
from typing import Iterable, Mapping

from core.errors import RegistryNotBuiltError
from core.logging_config import get_logger
from storage.loader import load_registry
from storage.registry import RegistryResult, StorageRegistry, build_registry
from storage.results import Rejected

_LOGGER = get_logger(__name__)


class RegistryHolder:
    """Holds the currently published registry, if any."""

    def __init__(self, registry: StorageRegistry | None = None) -> None:
        self._registry = registry
        self._swap_lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._registry is not None

    def current(self) -> StorageRegistry:
        """Return the published registry.

        Raises:
            RegistryNotBuiltError: If nothing has been published yet.
        """
        registry = self._registry
        if registry is None:
            raise RegistryNotBuiltError(
                "Storage registry has not been built. Load storage configuration first."
            )
        return registry

    def publish(self, registry: StorageRegistry) -> None:
        """Replace the published registry with a fully built one."""
        with self._swap_lock:
            self._registry = registry
        _LOGGER.info("storage_registry_published", names=list(registry.names()))

    def reload(
        self,
        entries: Iterable[Mapping[str, object]],
        db_directory: str | None = None,
        index_directory: str | None = None,
    ) -> RegistryResult:
        """Build a new registry from entries and publish it on success.

        A rejected build leaves the previously published registry in place.
        """
        return self._publish_result(build_registry(entries, db_directory, index_directory))

    def reload_from_file(self, config_path: str | Path) -> RegistryResult:
        """Build a new registry from a YAML config file and publish it on success."""
        return self._publish_result(load_registry(config_path))

    def _publish_result(self, result: RegistryResult) -> RegistryResult:
        if isinstance(result, Rejected):
            _LOGGER.warning("storage_registry_reload_failed", error=str(result.error))
            return result
        self.publish(result.value)
        return result
