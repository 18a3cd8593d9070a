"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on the MongoDB driver directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract for document collections.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).  Every method is a single round-trip
    to the store; look-ups return ``None`` on a miss instead of raising.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its identifier."""

    @abstractmethod
    def list(self) -> List[T]:
        """List every entity in the collection."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """Insert a new entity and return it with its identifier populated."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID; ``True`` only if a document was removed."""
