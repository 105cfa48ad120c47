"""Tests for the sliding-window rate limiter."""

from starlette.requests import Request

from middleware import RateLimitConfig, RateLimiter, RateLimitMiddleware
from middleware.rate_limit import client_id


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


class TestRateLimiter:
    """Tests for RateLimiter."""

    def setup_method(self):
        self.clock = FakeClock()
        self.limiter = RateLimiter(
            RateLimitConfig(requests_per_minute=5, requests_per_hour=8, burst_limit=3),
            clock=self.clock,
        )

    def test_burst_limit(self):
        for _ in range(3):
            assert self.limiter.check("ip:1").allowed

        decision = self.limiter.check("ip:1")
        assert not decision.allowed
        assert decision.headers["Retry-After"] == "10"

    def test_burst_window_slides(self):
        for _ in range(3):
            self.limiter.check("ip:1")

        self.clock.now += 11
        assert self.limiter.check("ip:1").allowed

    def test_minute_limit(self):
        for _ in range(5):
            assert self.limiter.check("ip:1").allowed
            self.clock.now += 4

        decision = self.limiter.check("ip:1")
        assert not decision.allowed
        assert decision.headers["X-RateLimit-Limit"] == "5"

    def test_hour_limit(self):
        for _ in range(8):
            assert self.limiter.check("ip:1").allowed
            self.clock.now += 61

        decision = self.limiter.check("ip:1")
        assert not decision.allowed
        assert decision.message == "Hourly rate limit exceeded."

    def test_clients_are_independent(self):
        for _ in range(3):
            self.limiter.check("ip:1")

        assert self.limiter.check("ip:2").allowed

    def test_remaining_header(self):
        decision = self.limiter.check("ip:1")
        assert decision.headers["X-RateLimit-Remaining"] == "4"

    def test_idle_clients_are_evicted(self):
        self.limiter.check("ip:1")
        self.limiter.check("ip:2")

        self.clock.now += 3601
        self.limiter.check("ip:2")

        assert set(self.limiter._requests) == {"ip:2"}
        assert len(self.limiter._requests["ip:2"]) == 1

    def test_recent_clients_are_kept(self):
        self.limiter.check("ip:1")

        self.clock.now += 120
        self.limiter.check("ip:2")

        assert set(self.limiter._requests) == {"ip:1", "ip:2"}


def make_request(headers: dict[str, str] | None = None) -> Request:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/api/ai/triage",
        "headers": [
            (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
        ],
        "client": ("10.0.0.7", 50000),
    }
    return Request(scope)


class TestClientId:
    """Tests for client_id."""

    def test_forwarded_for_ignored_by_default(self):
        request = make_request({"X-Forwarded-For": "203.0.113.9"})
        assert client_id(request) == "ip:10.0.0.7"

    def test_forwarded_for_used_behind_trusted_proxy(self):
        request = make_request({"X-Forwarded-For": "203.0.113.9, 10.0.0.1"})
        assert client_id(request, trust_forwarded_for=True) == "ip:203.0.113.9"

    def test_peer_used_without_header(self):
        assert client_id(make_request(), trust_forwarded_for=True) == "ip:10.0.0.7"

    def test_middleware_reads_config(self):
        middleware = RateLimitMiddleware(
            app=None, config=RateLimitConfig(trust_forwarded_for=True)
        )
        assert middleware.trust_forwarded_for is True
