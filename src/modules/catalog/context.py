"""Catalog persistence gateway.

``CatalogContext`` owns the long-lived MongoDB client and the products
collection handle.  One instance is created per process (see
``CatalogConfig.context``) and injected into repositories; it is shared
read-only across requests.
"""

from __future__ import annotations

from typing import Any, Dict

import structlog
from django.apps import apps
from django.utils.module_loading import import_string
from pymongo.collection import Collection

from modules.catalog.seed import seed_products

logger = structlog.get_logger(__name__)


class CatalogContext:
    def __init__(
        self,
        client: Any,
        database_name: str,
        collection_name: str,
        seed: bool = True,
    ) -> None:
        self.client = client
        self.database = client[database_name]
        self.products: Collection = self.database[collection_name]
        if seed:
            seed_products(self.products)

    @classmethod
    def from_settings(cls, options: Dict[str, Any]) -> CatalogContext:
        """Build the context from ``settings.CATALOG_DATABASE_SETTINGS``.

        ``CLIENT_CLASS`` is a dotted path so tests can swap in an
        in-memory client.
        """
        client_class = import_string(options.get("CLIENT_CLASS", "pymongo.MongoClient"))
        client = client_class(options["CONNECTION_STRING"])
        logger.info(
            "catalog.context_created",
            connection=options["CONNECTION_STRING"],
            database=options["DATABASE_NAME"],
            collection=options["COLLECTION_NAME"],
        )
        try:
            return cls(
                client,
                options["DATABASE_NAME"],
                options["COLLECTION_NAME"],
                seed=options.get("SEED_ON_STARTUP", True),
            )
        except Exception:
            client.close()
            raise

    def ping(self) -> None:
        """Round-trip to the server; raises if it is unreachable."""
        self.database.command("ping")

    def close(self) -> None:
        self.client.close()


def get_catalog_context() -> CatalogContext:
    """Return the process-wide context held by the catalog app config."""
    return apps.get_app_config("catalog").context
