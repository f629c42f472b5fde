"""Discriminated build results for storage resolution.

Builders return either ``Resolved`` carrying the finished value or
``Rejected`` carrying the storage configuration error, so callers handle
failure explicitly instead of relying on propagation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from core.errors import StorageConfigError
from core.types import StorageProperty

T = TypeVar("T")


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """Successful build outcome."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Rejected:
    """Failed build outcome holding the first error encountered."""

    error: StorageConfigError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


PropertyResult = Union[Resolved[StorageProperty], Rejected]
