"""Catalog service layer (Use Cases).

Orchestrates the catalog rules, delegating persistence to the injected
``IProductRepository``.

Business rules enforced here:
- RN-CAT-002: a product name may not be created twice and updates
  address an existing name.  This is a check-then-act sequence over two
  store round-trips with no lock or unique index, so two concurrent
  writers using the same name can both pass the check.
- A replace or delete the store did not apply is reported as
  ``ProductNotPersisted``; the driver's reason is not exposed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.catalog.exceptions import (
    ProductAlreadyExists,
    ProductNotFound,
    ProductNotPersisted,
)
from modules.catalog.mappers import to_product
from modules.catalog.models import Product

if TYPE_CHECKING:
    from modules.catalog.dtos import ProductDTO
    from modules.catalog.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class CatalogService:
    """Application service for catalog use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return self._repo.list()

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by id.

        Raises:
            ProductNotFound: if no product has this id.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("catalog.product_not_found", product_id=id)
            raise ProductNotFound(f"Product with id: {id}, not found")
        return product

    def list_by_category(self, category: str) -> List[Product]:
        return self._repo.list_by_category(category)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductDTO) -> Product:
        """Create a product after checking its name is free.

        Raises:
            ProductAlreadyExists: if the name is already taken.
        """
        product = to_product(dto)
        log = logger.bind(name=product.name)

        if self._repo.exists_by_name(product.name):
            log.warning("catalog.duplicate_name")
            raise ProductAlreadyExists(f"Product {product.name} already exists")

        product = self._repo.create(product)
        log.info("catalog.product_created", product_id=product.id)
        return product

    def update_product(self, dto: ProductDTO) -> Product:
        """Replace the stored product that has ``dto.name``.

        Only non-name fields can change: the document to replace is found
        by the same name it is replaced with.

        Raises:
            ProductNotFound: if no product has this name.
            ProductNotPersisted: if the store did not modify a document.
        """
        product = to_product(dto)
        log = logger.bind(name=product.name)

        if not self._repo.exists_by_name(dto.name):
            log.info("catalog.product_not_found")
            raise ProductNotFound(f"Product {product.name} does not exist")

        if not self._repo.update(product):
            log.error("catalog.update_failed")
            raise ProductNotPersisted(
                f"Error updating product {product.name}, please try again later"
            )

        log.info("catalog.product_updated")
        return product

    def delete_product(self, id: str) -> Product:
        """Delete a product by id and return the removed entity.

        Raises:
            ProductNotFound: if no product has this id.
            ProductNotPersisted: if the store did not remove the document.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("catalog.product_not_found", product_id=id)
            raise ProductNotFound(f"Product, {id} not found")

        if not self._repo.delete(id):
            logger.error("catalog.delete_failed", product_id=id)
            raise ProductNotPersisted(
                f"Error deleting product {product.name}, please try again later"
            )

        logger.info("catalog.product_deleted", product_id=id, name=product.name)
        return product
