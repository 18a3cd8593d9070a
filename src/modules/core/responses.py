"""Uniform response envelope.

Every API response, success or failure, is wrapped as::

    {"status": bool, "data": T | null, "message": str | null}

``ApiResponse`` is the single parametrised result type used by all
views; ``envelope_serializer`` builds the matching OpenAPI component.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from rest_framework import serializers, status as http_status
from rest_framework.response import Response

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    status: bool
    data: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, data: Optional[T] = None, message: Optional[str] = None) -> ApiResponse[T]:
        return cls(status=True, data=data, message=message)

    @classmethod
    def failure(cls, message: str) -> ApiResponse[T]:
        return cls(status=False, data=None, message=message)

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "data": self.data, "message": self.message}

    def to_response(self, status_code: int = http_status.HTTP_200_OK) -> Response:
        return Response(self.as_dict(), status=status_code)


def envelope_serializer(
    name: str, data: Optional[serializers.Field] = None
) -> type[serializers.Serializer]:
    """Build a named envelope serializer for schema generation.

    ``data`` is the field describing the payload; ``None`` documents an
    envelope whose ``data`` is always null.
    """
    fields: dict[str, serializers.Field] = {
        "status": serializers.BooleanField(),
        "message": serializers.CharField(allow_null=True),
        "data": data if data is not None else serializers.JSONField(allow_null=True),
    }
    return type(name, (serializers.Serializer,), fields)
