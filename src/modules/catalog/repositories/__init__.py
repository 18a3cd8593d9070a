"""Catalog repositories package."""

from modules.catalog.repositories.interfaces import IProductRepository
from modules.catalog.repositories.mongo_repository import ProductMongoRepository

__all__ = ["IProductRepository", "ProductMongoRepository"]
