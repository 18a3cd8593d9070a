"""Structural mapping between DTOs and entities.

Fields are copied by matching name; anything the destination does not
declare is ignored and anything the source lacks keeps the
destination's default (``Product.id`` stays ``None`` so the store can
assign it).  No validation or side effects happen here.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel

from modules.catalog.dtos import ProductDTO
from modules.catalog.models import Product

D = TypeVar("D", bound=BaseModel)


def map_model(source: BaseModel, destination: type[D]) -> D:
    shared = type(source).model_fields.keys() & destination.model_fields.keys()
    return destination(**{name: getattr(source, name) for name in shared})


def to_product(dto: ProductDTO) -> Product:
    return map_model(dto, Product)
