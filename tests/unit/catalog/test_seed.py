"""Unit tests for catalog seeding and context construction."""

from __future__ import annotations

from unittest.mock import patch

import mongomock
import pytest

from modules.catalog.context import CatalogContext
from modules.catalog.seed import sample_products, seed_products

pytestmark = pytest.mark.unit


class TestSeedProducts:
    def test_seeds_empty_collection(self):
        collection = mongomock.MongoClient().db.products
        inserted = seed_products(collection)
        assert inserted == len(sample_products())
        assert collection.count_documents({}) == inserted

    def test_skips_non_empty_collection(self):
        collection = mongomock.MongoClient().db.products
        collection.insert_one({"Name": "Existing"})
        assert seed_products(collection) == 0
        assert collection.count_documents({}) == 1

    def test_sample_names_are_unique(self):
        names = [p.name for p in sample_products()]
        assert len(names) == len(set(names))


class TestCatalogContext:
    def test_seeds_on_creation_by_default(self):
        context = CatalogContext(mongomock.MongoClient(), "CatalogDb", "Products")
        assert context.products.count_documents({}) == len(sample_products())

    def test_seed_can_be_disabled(self):
        context = CatalogContext(
            mongomock.MongoClient(), "CatalogDb", "Products", seed=False
        )
        assert context.products.count_documents({}) == 0

    def test_from_settings_uses_configured_client_class(self):
        context = CatalogContext.from_settings(
            {
                "CONNECTION_STRING": "mongodb://localhost:27017",
                "DATABASE_NAME": "SettingsDb",
                "COLLECTION_NAME": "Items",
                "CLIENT_CLASS": "mongomock.MongoClient",
                "SEED_ON_STARTUP": False,
            }
        )
        assert isinstance(context.client, mongomock.MongoClient)
        assert context.database.name == "SettingsDb"
        assert context.products.name == "Items"

    def test_ping_succeeds(self):
        context = CatalogContext(mongomock.MongoClient(), "CatalogDb", "Products", seed=False)
        context.ping()

    def test_from_settings_closes_client_when_seeding_fails(self):
        options = {
            "CONNECTION_STRING": "mongodb://localhost:27017",
            "DATABASE_NAME": "SettingsDb",
            "COLLECTION_NAME": "Items",
            "CLIENT_CLASS": "mongomock.MongoClient",
            "SEED_ON_STARTUP": True,
        }
        with patch(
            "modules.catalog.context.seed_products",
            side_effect=ConnectionError("store unreachable"),
        ), patch.object(mongomock.MongoClient, "close") as close:
            with pytest.raises(ConnectionError):
                CatalogContext.from_settings(options)
        close.assert_called_once_with()
