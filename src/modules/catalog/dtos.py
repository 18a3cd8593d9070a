"""Catalog DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``ProductDTO``: body of both create and update requests.  It carries
  no ``id``; the store assigns one on insert and updates match by name.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProductDTO(BaseModel):
    """Immutable DTO for product write requests.

    Field presence rules (non-empty name, category, summary and a
    non-zero price) are checked by ``ProductRequestSerializer`` before a
    DTO is ever built.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    summary: str
    price: Decimal
    description: Optional[str] = None
    image_file: Optional[str] = None
