"""Integration tests for the ``seed_catalog`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.catalog.seed import sample_products

pytestmark = pytest.mark.integration


def _run(*args) -> str:
    out = StringIO()
    call_command("seed_catalog", *args, stdout=out)
    return out.getvalue()


class TestSeedCatalogCommand:
    def test_seeds_empty_catalog(self, catalog_context):
        output = _run()
        assert "Seed completed" in output
        assert catalog_context.products.count_documents({}) == len(sample_products())

    def test_skips_populated_catalog(self, catalog_context):
        _run()
        output = _run()
        assert "nothing seeded" in output
        assert catalog_context.products.count_documents({}) == len(sample_products())

    def test_force_replaces_existing_products(self, catalog_context):
        catalog_context.products.insert_one({"Name": "Leftover"})
        output = _run("--force")
        assert "Removed 1 products." in output
        assert catalog_context.products.find_one({"Name": "Leftover"}) is None
        assert catalog_context.products.count_documents({}) == len(sample_products())

    def test_seeded_products_are_served(self, api_client):
        _run()
        response = api_client.get("/api/v1/catalog/GetProductByCategory/Smart%20Phone")
        names = sorted(p["name"] for p in response.json()["data"])
        assert names == ["HTC U11+ Plus", "IPhone X", "Samsung 10"]
