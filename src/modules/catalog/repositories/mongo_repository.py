"""MongoDB implementation of the Product repository.

Satisfies ``IProductRepository`` with one driver call per method on the
collection handle owned by ``CatalogContext``.
Error handling follows the Null Object pattern: look-ups return ``None``
(or ``False``) for missing documents and malformed ids instead of
raising.  Driver errors are not interpreted here; they propagate to the
caller unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from bson import ObjectId

from modules.catalog.models import Product
from modules.catalog.repositories.interfaces import IProductRepository

if TYPE_CHECKING:
    from modules.catalog.context import CatalogContext

logger = structlog.get_logger(__name__)


def _object_id(id: str) -> Optional[ObjectId]:
    if not ObjectId.is_valid(id):
        return None
    return ObjectId(id)


class ProductMongoRepository(IProductRepository):
    """Concrete Product repository backed by a pymongo collection."""

    def __init__(self, context: CatalogContext) -> None:
        self._products = context.products

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[Product]:
        return [Product.from_document(doc) for doc in self._products.find({})]

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by its ObjectId.

        Returns ``None`` for non-existent or malformed ids.
        """
        oid = _object_id(id)
        if oid is None:
            return None
        document = self._products.find_one({"_id": oid})
        return Product.from_document(document) if document else None

    def list_by_category(self, category: str) -> List[Product]:
        return [
            Product.from_document(doc)
            for doc in self._products.find({"Category": category})
        ]

    def exists_by_name(self, name: str) -> bool:
        return self._products.find_one({"Name": name}, {"_id": 1}) is not None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, entity: Product) -> Product:
        """Insert a product; the store-assigned id is written back on ``entity``."""
        result = self._products.insert_one(entity.to_document())
        entity.id = str(result.inserted_id)
        logger.info("product.inserted", product_id=entity.id, name=entity.name)
        return entity

    def update(self, entity: Product) -> bool:
        document = entity.to_document()
        document.pop("_id", None)
        result = self._products.replace_one({"Name": entity.name}, document)
        updated = result.acknowledged and result.modified_count > 0
        logger.info("product.replaced", name=entity.name, modified=updated)
        return updated

    def delete(self, id: str) -> bool:
        oid = _object_id(id)
        if oid is None:
            return False
        result = self._products.delete_one({"_id": oid})
        deleted = result.acknowledged and result.deleted_count > 0
        logger.info("product.deleted", product_id=id, deleted=deleted)
        return deleted
