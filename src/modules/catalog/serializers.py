"""Catalog DRF serializers for API input/output.

The serializers operate at the Interface layer (API Views).
``ProductRequestSerializer`` validates write bodies and hands the
Service Layer a ``ProductDTO``; ``ProductSerializer`` renders entities.
Wire field names are camelCase (``imageFile``).
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from modules.catalog.dtos import ProductDTO


DECIMAL128_DIGITS = 34


def _not_empty(label: str) -> dict[str, str]:
    message = f"'{label}' must not be empty."
    return {"required": message, "blank": message, "null": message}


def _required_text(label: str) -> serializers.CharField:
    """Non-empty text kept exactly as sent; whitespace-only counts as empty."""

    def not_whitespace(value: str) -> None:
        if not value.strip():
            raise serializers.ValidationError(f"'{label}' must not be empty.")

    return serializers.CharField(
        trim_whitespace=False,
        validators=[not_whitespace],
        error_messages=_not_empty(label),
    )


class ProductRequestSerializer(serializers.Serializer):
    """Body of ``POST`` and ``PUT`` on the catalog.

    ``name``, ``category``, ``summary`` must be non-empty and ``price``
    must be present and different from zero.  Text and price values are
    passed on unchanged: no trimming or rounding.  ``price`` is only
    bounded by the 34 significant digits a ``Decimal128`` can store.
    """

    name = _required_text("Name")
    category = _required_text("Category")
    summary = _required_text("Summary")
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
    )
    price = serializers.DecimalField(
        max_digits=DECIMAL128_DIGITS,
        decimal_places=None,
        error_messages=_not_empty("Price"),
    )
    imageFile = serializers.CharField(
        source="image_file",
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        trim_whitespace=False,
    )

    def validate_price(self, value: Decimal) -> Decimal:
        if value == 0:
            raise serializers.ValidationError("'Price' must not be empty.")
        return value

    def to_dto(self) -> ProductDTO:
        return ProductDTO(**self.validated_data)


class ProductSerializer(serializers.Serializer):
    """Read-only representation of a ``Product`` entity."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    summary = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True, allow_null=True)
    price = serializers.DecimalField(max_digits=None, decimal_places=None, read_only=True)
    imageFile = serializers.CharField(source="image_file", read_only=True, allow_null=True)
