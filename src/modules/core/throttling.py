"""Rate limiting for the public API.

The limiting strategy is picked from ``settings.RATE_LIMIT`` and applied
by listing ``StrategyRateThrottle`` in a view's ``throttle_classes``.
Counters live in the ``default`` Django cache (Redis in production,
local memory in tests).

Strategies:
- ``ip_address``: one bucket per client address.
- ``per_user``: one bucket per authenticated user, anonymous callers
  fall back to their address.
- ``per_api_key``: one bucket per API key header value, requests without
  a key fall back to their address.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Optional

import structlog
from django.conf import settings
from rest_framework.request import Request
from rest_framework.throttling import SimpleRateThrottle

logger = structlog.get_logger(__name__)


class RateLimitStrategy(str, Enum):
    IP_ADDRESS = "ip_address"
    PER_USER = "per_user"
    PER_API_KEY = "per_api_key"


class StrategyRateThrottle(SimpleRateThrottle):
    scope = "catalog"

    def __init__(self) -> None:
        conf = settings.RATE_LIMIT
        self.strategy = RateLimitStrategy(conf.get("STRATEGY", RateLimitStrategy.IP_ADDRESS))
        self.api_key_header = conf.get("API_KEY_HEADER", "X-Api-Key")
        super().__init__()

    def get_rate(self) -> Optional[str]:
        return settings.RATE_LIMIT.get("RATE")

    def get_cache_key(self, request: Request, view) -> str:
        ident = self._identify(request)
        return self.cache_format % {
            "scope": f"{self.scope}:{self.strategy.value}",
            "ident": ident,
        }

    def _identify(self, request: Request) -> str:
        if self.strategy is RateLimitStrategy.PER_USER:
            user = getattr(request, "user", None)
            if user is not None and user.is_authenticated:
                return f"user-{user.pk}"
        elif self.strategy is RateLimitStrategy.PER_API_KEY:
            api_key = request.headers.get(self.api_key_header)
            if api_key:
                return "key-" + hashlib.sha256(api_key.encode()).hexdigest()[:32]
        return f"ip-{self.get_ident(request)}"

    def throttle_failure(self) -> bool:
        logger.warning(
            "rate_limit.exceeded",
            strategy=self.strategy.value,
            key=self.key,
        )
        return False
