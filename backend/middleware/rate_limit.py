"""Rate limiting for the LLM-backed endpoints.

Every AI and report call costs a provider request, so clients are limited
with an in-memory sliding window per IP address.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from responses import ResponseCode, error_dict, get_http_status

logger = logging.getLogger(__name__)

# Path prefixes whose requests reach the LLM provider
LLM_PATH_PREFIXES = ("/api/ai/", "/api/reports/", "/api/triage/")

WINDOW_SECONDS = 3600
SWEEP_INTERVAL_SECONDS = 60


@dataclass
class RateLimitConfig:
    """Per-client request limits."""

    requests_per_minute: int = 30
    requests_per_hour: int = 300
    burst_limit: int = 8  # Max requests in 10 seconds
    # Only enable behind a proxy that overwrites the header
    trust_forwarded_for: bool = False


@dataclass
class RateLimitDecision:
    allowed: bool
    message: str | None
    headers: dict[str, str]


def client_id(request: Request, trust_forwarded_for: bool = False) -> str:
    """Socket peer, or the first X-Forwarded-For hop when the proxy is trusted."""
    forwarded = request.headers.get("X-Forwarded-For") if trust_forwarded_for else None
    if forwarded:
        return f"ip:{forwarded.split(',')[0].strip()}"
    if request.client:
        return f"ip:{request.client.host}"
    return "unknown"


class RateLimiter:
    """Sliding-window limiter keyed by client id."""

    def __init__(
        self,
        config: RateLimitConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or RateLimitConfig()
        self._clock = clock
        self._requests: dict[str, list[float]] = {}
        self._last_sweep = clock()

    def _denied(self, message: str, limit: int, retry_after: int) -> RateLimitDecision:
        return RateLimitDecision(
            allowed=False,
            message=message,
            headers={
                "X-RateLimit-Limit": str(limit),
                "X-RateLimit-Remaining": "0",
                "Retry-After": str(retry_after),
            },
        )

    def _sweep(self, now: float) -> None:
        """Drop clients with no request inside the hourly window."""
        if now - self._last_sweep < SWEEP_INTERVAL_SECONDS:
            return
        self._last_sweep = now
        stale = [
            key
            for key, history in self._requests.items()
            if not history or history[-1] <= now - WINDOW_SECONDS
        ]
        for key in stale:
            del self._requests[key]

    def check(self, key: str) -> RateLimitDecision:
        """Record the request for ``key`` if it fits every window."""
        now = self._clock()
        self._sweep(now)
        history = [
            ts for ts in self._requests.get(key, ()) if ts > now - WINDOW_SECONDS
        ]
        self._requests[key] = history

        if sum(1 for ts in history if ts > now - 10) >= self.config.burst_limit:
            return self._denied(
                "Too many requests. Please slow down.", self.config.burst_limit, 10
            )

        minute_count = sum(1 for ts in history if ts > now - 60)
        if minute_count >= self.config.requests_per_minute:
            return self._denied(
                "Rate limit exceeded. Please wait a moment.",
                self.config.requests_per_minute,
                60,
            )

        if len(history) >= self.config.requests_per_hour:
            return self._denied(
                "Hourly rate limit exceeded.", self.config.requests_per_hour, 3600
            )

        history.append(now)
        return RateLimitDecision(
            allowed=True,
            message=None,
            headers={
                "X-RateLimit-Limit": str(self.config.requests_per_minute),
                "X-RateLimit-Remaining": str(
                    self.config.requests_per_minute - minute_count - 1
                ),
            },
        )


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Applies the limiter to LLM-backed paths only."""

    def __init__(self, app, config: RateLimitConfig | None = None) -> None:
        super().__init__(app)
        self.limiter = RateLimiter(config)
        self.trust_forwarded_for = self.limiter.config.trust_forwarded_for

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not request.url.path.startswith(LLM_PATH_PREFIXES):
            return await call_next(request)

        key = client_id(request, self.trust_forwarded_for)
        decision = self.limiter.check(key)

        if not decision.allowed:
            logger.warning("Rate limit exceeded for %s on %s", key, request.url.path)
            return JSONResponse(
                status_code=get_http_status(ResponseCode.LLM_RATE_LIMIT),
                content=error_dict(
                    ResponseCode.LLM_RATE_LIMIT,
                    decision.message,
                    request_id=getattr(request.state, "request_id", None),
                ),
                headers=decision.headers,
            )

        response = await call_next(request)
        response.headers.update(decision.headers)
        return response
