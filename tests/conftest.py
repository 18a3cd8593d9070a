from decimal import Decimal

import mongomock
import pytest
from django.apps import apps
from django.core.cache import caches
from rest_framework.test import APIClient

from modules.catalog.context import CatalogContext
from modules.catalog.models import Product


@pytest.fixture(autouse=True)
def _clear_caches():
    """Rate-limit counters and cached responses never leak between tests."""
    for alias in ("default", "responses"):
        caches[alias].clear()


@pytest.fixture()
def catalog_context():
    """Empty in-memory catalog installed as the process-wide context."""
    context = CatalogContext(
        mongomock.MongoClient(), "CatalogTestDb", "Products", seed=False
    )
    config = apps.get_app_config("catalog")
    config._context = context
    yield context
    config._context = None
    context.close()


@pytest.fixture()
def api_client(catalog_context):
    """DRF APIClient talking to the in-memory catalog."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def product_factory():
    """Build unsaved ``Product`` entities with sensible defaults."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "Nike Shoe",
            "category": "Shoes",
            "summary": "Running",
            "description": "Lightweight running shoe",
            "price": Decimal("100.00"),
            "image_file": "nike.png",
        }
        defaults.update(overrides)
        return Product(**defaults)

    return _make
