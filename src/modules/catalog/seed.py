"""Sample products written to an empty catalog collection."""

from __future__ import annotations

from decimal import Decimal
from typing import List

import structlog
from pymongo.collection import Collection

from modules.catalog.models import Product

logger = structlog.get_logger(__name__)

_PHONE_SUMMARY = "This phone is the company's biggest change to its flagship smartphone in years."
_PHONE_DESCRIPTION = (
    "A large edge-to-edge display, a faster processor and an improved dual camera "
    "in a body made of glass and stainless steel."
)


def sample_products() -> List[Product]:
    return [
        Product(
            name="IPhone X",
            category="Smart Phone",
            summary=_PHONE_SUMMARY,
            description=_PHONE_DESCRIPTION,
            image_file="product-1.png",
            price=Decimal("950.00"),
        ),
        Product(
            name="Samsung 10",
            category="Smart Phone",
            summary=_PHONE_SUMMARY,
            description=_PHONE_DESCRIPTION,
            image_file="product-2.png",
            price=Decimal("840.00"),
        ),
        Product(
            name="Huawei Plus",
            category="White Appliances",
            summary=_PHONE_SUMMARY,
            description=_PHONE_DESCRIPTION,
            image_file="product-3.png",
            price=Decimal("650.00"),
        ),
        Product(
            name="Xiaomi Mi 9",
            category="White Appliances",
            summary=_PHONE_SUMMARY,
            description=_PHONE_DESCRIPTION,
            image_file="product-4.png",
            price=Decimal("470.00"),
        ),
        Product(
            name="HTC U11+ Plus",
            category="Smart Phone",
            summary=_PHONE_SUMMARY,
            description=_PHONE_DESCRIPTION,
            image_file="product-5.png",
            price=Decimal("380.00"),
        ),
        Product(
            name="LG G7 ThinQ",
            category="Home Kitchen",
            summary=_PHONE_SUMMARY,
            description=_PHONE_DESCRIPTION,
            image_file="product-6.png",
            price=Decimal("240.00"),
        ),
    ]


def seed_products(collection: Collection) -> int:
    """Insert the sample products if ``collection`` is empty.

    Returns the number of documents inserted (0 when data already exists).
    """
    if collection.find_one({}, {"_id": 1}) is not None:
        return 0
    documents = [product.to_document() for product in sample_products()]
    collection.insert_many(documents)
    logger.info("catalog.seeded", collection=collection.name, count=len(documents))
    return len(documents)
