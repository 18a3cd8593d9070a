import time
from typing import Any, Dict

import structlog
from django.core.cache import caches
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.catalog.context import get_catalog_context
from modules.core.exception_handlers import UNEXPECTED_ERROR_MESSAGE
from modules.core.responses import ApiResponse

logger = structlog.get_logger(__name__)


def _timed(check) -> Dict[str, Any]:
    start = time.monotonic()
    check()
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def _ping_cache() -> None:
    cache = caches["default"]
    cache.set("_health_check", "ok", 10)
    if cache.get("_health_check") != "ok":
        raise ConnectionError("Cache read failed")


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True
    started = time.monotonic()

    # Check document store
    try:
        services["database"] = _timed(lambda: get_catalog_context().ping())
    except Exception:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.exception("health_check.database_failure")

    # Check cache (Redis)
    try:
        services["cache"] = _timed(_ping_cache)
    except Exception:
        services["cache"] = {"status": "down"}
        overall_healthy = False
        logger.exception("health_check.cache_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check.completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "totalDuration": round((time.monotonic() - started) * 1000, 2),
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


def not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    """JSON envelope for URLs that match no route."""
    message = f"The resource {request.path} was not found"
    return JsonResponse(ApiResponse.failure(message).as_dict(), status=404)


def server_error(request: HttpRequest) -> JsonResponse:
    """JSON envelope for errors raised outside the API views."""
    return JsonResponse(ApiResponse.failure(UNEXPECTED_ERROR_MESSAGE).as_dict(), status=500)
