"""Global error handling.

``envelope_exception_handler`` is registered as DRF's
``EXCEPTION_HANDLER``.  Every error that escapes a view leaves the
service wrapped in the standard ``{status, data, message}`` envelope:

* request validation errors -> 400, ``message`` is a list of
  ``{"Error": ...}`` entries (first message per field), ``data`` is ``{}``;
* throttling -> 429 with ``Retry-After``;
* other API exceptions -> their own status code and detail;
* anything else -> 500 with a generic message; the exception is logged
  but never echoed to the client.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.responses import ApiResponse

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred, please try again later"


def _first_message(detail: Any) -> str:
    if isinstance(detail, dict):
        return _first_message(next(iter(detail.values()), ""))
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def validation_errors(detail: Any) -> List[Dict[str, str]]:
    """Flatten a DRF validation ``detail`` into ``[{"Error": msg}, ...]``."""
    if isinstance(detail, dict):
        return [{"Error": _first_message(messages)} for messages in detail.values()]
    if isinstance(detail, (list, tuple)):
        return [{"Error": _first_message(messages)} for messages in detail]
    return [{"Error": str(detail)}]


def envelope_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if response is None:
        logger.exception("api.unhandled_error", view=view_name, error_type=type(exc).__name__)
        return ApiResponse.failure(UNEXPECTED_ERROR_MESSAGE).to_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, exceptions.ValidationError):
        logger.info("api.validation_failed", view=view_name, errors=exc.detail)
        response.data = {
            "status": False,
            "message": validation_errors(exc.detail),
            "data": {},
        }
        return response

    if isinstance(exc, exceptions.Throttled):
        message = "Request limit exceeded."
        if exc.wait is not None:
            message = f"Request limit exceeded, retry in {int(exc.wait)} seconds."
        response.data = ApiResponse.failure(message).as_dict()
        return response

    logger.info(
        "api.request_rejected",
        view=view_name,
        status_code=response.status_code,
        detail=str(getattr(exc, "detail", exc)),
    )
    response.data = ApiResponse.failure(_first_message(getattr(exc, "detail", str(exc)))).as_dict()
    return response
