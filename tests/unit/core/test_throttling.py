"""Unit tests for StrategyRateThrottle cache keys and rate resolution."""

from __future__ import annotations

import pytest
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from modules.core.throttling import RateLimitStrategy, StrategyRateThrottle

pytestmark = pytest.mark.unit


class _User:
    is_authenticated = True
    pk = 42


@pytest.fixture()
def factory():
    return APIRequestFactory()


def _throttle(settings, strategy: str) -> StrategyRateThrottle:
    settings.RATE_LIMIT = {
        "STRATEGY": strategy,
        "RATE": "5/minute",
        "API_KEY_HEADER": "X-Api-Key",
    }
    return StrategyRateThrottle()


class TestStrategyRateThrottle:
    def test_rate_comes_from_settings(self, settings):
        throttle = _throttle(settings, "ip_address")
        assert throttle.strategy is RateLimitStrategy.IP_ADDRESS
        assert (throttle.num_requests, throttle.duration) == (5, 60)

    def test_unknown_strategy_is_rejected(self, settings):
        with pytest.raises(ValueError):
            _throttle(settings, "per_planet")

    def test_ip_address_key(self, settings, factory):
        throttle = _throttle(settings, "ip_address")
        request = Request(factory.get("/", REMOTE_ADDR="10.0.0.1"))
        assert throttle.get_cache_key(request, None) == (
            "throttle_catalog:ip_address_ip-10.0.0.1"
        )

    def test_per_user_key_for_authenticated_user(self, settings, factory):
        throttle = _throttle(settings, "per_user")
        request = Request(factory.get("/"))
        request.user = _User()
        assert throttle.get_cache_key(request, None) == "throttle_catalog:per_user_user-42"

    def test_per_user_falls_back_to_address(self, settings, factory):
        throttle = _throttle(settings, "per_user")
        request = Request(factory.get("/", REMOTE_ADDR="10.0.0.2"))
        assert throttle.get_cache_key(request, None).endswith("ip-10.0.0.2")

    def test_per_api_key_hashes_the_key(self, settings, factory):
        throttle = _throttle(settings, "per_api_key")
        request = Request(factory.get("/", HTTP_X_API_KEY="my-key"))
        key = throttle.get_cache_key(request, None)
        assert key.startswith("throttle_catalog:per_api_key_key-")
        assert "my-key" not in key

    def test_per_api_key_falls_back_to_address(self, settings, factory):
        throttle = _throttle(settings, "per_api_key")
        request = Request(factory.get("/", REMOTE_ADDR="10.0.0.3"))
        assert throttle.get_cache_key(request, None).endswith("ip-10.0.0.3")
