"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the catalog API
needs: filtering by category, the name existence check behind the
create/update preconditions (RN-CAT-002) and replace-by-name.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.catalog.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list_by_category(self, category: str) -> List["Product"]:
        """List products whose category matches exactly (case-sensitive)."""

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """Return ``True`` if a product with exactly this name is stored."""

    @abstractmethod
    def update(self, entity: "Product") -> bool:
        """Replace the document whose name equals ``entity.name``.

        Returns ``True`` only if the store acknowledged and modified a
        document.
        """
