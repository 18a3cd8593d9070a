"""Product entity persisted in the catalog collection.

Business rules implemented:
- RN-CAT-001: ``id`` is assigned by the store on insert and never changes.
- RN-CAT-002: ``name`` identifies a product for create/update existence
  checks.  Uniqueness is a check-then-act rule enforced by the service
  layer, not a store constraint (see ``CatalogService``).
- RN-CAT-003: ``price`` is stored as ``Decimal128`` so no precision is lost.

Documents keep the PascalCase field names used by the catalog database.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.decimal128 import Decimal128
from pydantic import BaseModel


class Product(BaseModel):
    """Catalog product aggregate."""

    id: Optional[str] = None
    name: str
    category: str
    summary: str
    description: Optional[str] = None
    price: Decimal = Decimal("0")
    image_file: Optional[str] = None

    # ------------------------------------------------------------------
    # Document mapping
    # ------------------------------------------------------------------

    def to_document(self) -> Dict[str, Any]:
        """Return the BSON document for this product.

        ``_id`` is only included once the store has assigned one.
        """
        document: Dict[str, Any] = {
            "Name": self.name,
            "Category": self.category,
            "Summary": self.summary,
            "Description": self.description,
            "Price": Decimal128(self.price),
            "ImageFile": self.image_file,
        }
        if self.id is not None:
            document["_id"] = ObjectId(self.id)
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> Product:
        price = document.get("Price")
        if isinstance(price, Decimal128):
            price = price.to_decimal()
        return cls(
            id=str(document["_id"]),
            name=document.get("Name", ""),
            category=document.get("Category", ""),
            summary=document.get("Summary", ""),
            description=document.get("Description"),
            price=Decimal(str(price)) if price is not None else Decimal("0"),
            image_file=document.get("ImageFile"),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
