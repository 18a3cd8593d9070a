"""Catalog API views.

Exposes the ``CatalogService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into envelope responses
with the matching status code; anything unexpected is left to the
global exception handler.

Reads are cached in the ``responses`` cache and every successful write
clears it.  Rate limiting is attached explicitly through
``throttle_classes``.
"""

from __future__ import annotations

from django.conf import settings
from django.core.cache import caches
from django.utils.decorators import method_decorator
from django.views.decorators.cache import cache_page
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.catalog.context import get_catalog_context
from modules.catalog.exceptions import (
    ProductAlreadyExists,
    ProductNotFound,
    ProductNotPersisted,
)
from modules.catalog.repositories.mongo_repository import ProductMongoRepository
from modules.catalog.serializers import ProductRequestSerializer, ProductSerializer
from modules.catalog.services import CatalogService
from modules.core.responses import ApiResponse, envelope_serializer
from modules.core.throttling import StrategyRateThrottle
from modules.core.versioning import ReportApiVersionsMixin

ProductListEnvelope = envelope_serializer("ProductListEnvelope", ProductSerializer(many=True))
ProductEnvelope = envelope_serializer("ProductEnvelope", ProductSerializer(allow_null=True))
EmptyEnvelope = envelope_serializer("EmptyEnvelope")
ValidationEnvelope = envelope_serializer(
    "ValidationEnvelope", serializers.DictField(allow_empty=True)
)

cache_reads = method_decorator(
    cache_page(settings.RESPONSE_CACHE_SECONDS, cache="responses")
)


def invalidate_cached_reads() -> None:
    caches["responses"].clear()


@extend_schema_view(
    list=extend_schema(
        summary="List the product catalog",
        responses={200: ProductListEnvelope},
    ),
    retrieve=extend_schema(
        summary="Get a product by id",
        responses={200: ProductEnvelope, 404: ProductEnvelope},
    ),
    by_category=extend_schema(
        summary="List products in a category",
        responses={200: ProductListEnvelope},
    ),
    create=extend_schema(
        summary="Create a product",
        request=ProductRequestSerializer,
        responses={201: ProductEnvelope, 400: ValidationEnvelope, 422: ProductEnvelope},
    ),
    update=extend_schema(
        summary="Update the product with the given name",
        request=ProductRequestSerializer,
        responses={200: EmptyEnvelope, 400: ValidationEnvelope, 404: EmptyEnvelope, 500: EmptyEnvelope},
    ),
    destroy=extend_schema(
        summary="Delete a product by id",
        parameters=[
            OpenApiParameter("id", str, OpenApiParameter.QUERY, required=False),
        ],
        responses={200: EmptyEnvelope, 404: EmptyEnvelope, 500: EmptyEnvelope},
    ),
)
class CatalogViewSet(ReportApiVersionsMixin, ViewSet):
    """ViewSet for the product catalog.

    Uses ``CatalogService`` with ``ProductMongoRepository`` (DIP).  The
    repository wraps the process-wide ``CatalogContext``.
    """

    throttle_classes = [StrategyRateThrottle]

    @property
    def service(self) -> CatalogService:
        return CatalogService(repository=ProductMongoRepository(get_catalog_context()))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @cache_reads
    def list(self, request: Request, **kwargs) -> Response:
        """GET /api/v1/catalog"""
        products = self.service.list_products()
        data = ProductSerializer(products, many=True).data
        return ApiResponse.success(data).to_response()

    @cache_reads
    def retrieve(self, request: Request, id: str, **kwargs) -> Response:
        """GET /api/v1/catalog/{id}"""
        try:
            product = self.service.get_product(id)
        except ProductNotFound as exc:
            return ApiResponse.failure(str(exc)).to_response(status.HTTP_404_NOT_FOUND)
        data = ProductSerializer(product).data
        return ApiResponse.success(data, "Product data found").to_response()

    @cache_reads
    def by_category(self, request: Request, category: str, **kwargs) -> Response:
        """GET /api/v1/catalog/GetProductByCategory/{category}"""
        products = self.service.list_by_category(category)
        data = ProductSerializer(products, many=True).data
        return ApiResponse.success(data).to_response()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request, **kwargs) -> Response:
        """POST /api/v1/catalog"""
        serializer = ProductRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = self.service.create_product(serializer.to_dto())
        except ProductAlreadyExists as exc:
            return ApiResponse.failure(str(exc)).to_response(
                status.HTTP_422_UNPROCESSABLE_ENTITY
            )

        invalidate_cached_reads()
        data = ProductSerializer(product).data
        return ApiResponse.success(data, "Product successfully created").to_response(
            status.HTTP_201_CREATED
        )

    def update(self, request: Request, **kwargs) -> Response:
        """PUT /api/v1/catalog"""
        serializer = ProductRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = self.service.update_product(serializer.to_dto())
        except ProductNotFound as exc:
            return ApiResponse.failure(str(exc)).to_response(status.HTTP_404_NOT_FOUND)
        except ProductNotPersisted as exc:
            return ApiResponse.failure(str(exc)).to_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        invalidate_cached_reads()
        return ApiResponse.success(
            message=f"Product {product.name} updated successfully!"
        ).to_response()

    def destroy(self, request: Request, id: str | None = None, **kwargs) -> Response:
        """DELETE /api/v1/catalog/{id} or DELETE /api/v1/catalog?id={id}"""
        if id is None:
            id = request.query_params.get("id")
        if not id:
            raise serializers.ValidationError({"id": ["'Id' must not be empty."]})

        try:
            product = self.service.delete_product(id)
        except ProductNotFound as exc:
            return ApiResponse.failure(str(exc)).to_response(status.HTTP_404_NOT_FOUND)
        except ProductNotPersisted as exc:
            return ApiResponse.failure(str(exc)).to_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        invalidate_cached_reads()
        return ApiResponse.success(
            message=f"Product {product.name} deleted successfully!"
        ).to_response()
