"""Catalog URL configuration.

Routes are declared explicitly because the catalog replaces products by
name on ``PUT /catalog`` and also accepts ``DELETE /catalog?id=``, which
a ``DefaultRouter`` does not generate.
"""

from __future__ import annotations

from django.urls import path, register_converter

from modules.catalog.views import CatalogViewSet


class ObjectIdConverter:
    """Match exactly 24 characters; anything else is a route miss (404)."""

    regex = "[^/]{24}"

    def to_python(self, value: str) -> str:
        return value

    def to_url(self, value: str) -> str:
        return value


register_converter(ObjectIdConverter, "objectid")

catalog_collection = CatalogViewSet.as_view(
    {"get": "list", "post": "create", "put": "update", "delete": "destroy"}
)
catalog_detail = CatalogViewSet.as_view({"get": "retrieve", "delete": "destroy"})
catalog_by_category = CatalogViewSet.as_view({"get": "by_category"})

urlpatterns = [
    path("catalog", catalog_collection, name="catalog-list"),
    path("catalog/<objectid:id>", catalog_detail, name="catalog-detail"),
    path(
        "catalog/GetProductByCategory/<str:category>",
        catalog_by_category,
        name="catalog-by-category",
    ),
]
