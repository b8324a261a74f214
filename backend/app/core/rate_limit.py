"""Per-client throttling for quote creation."""

from __future__ import annotations

import logging
import math
import time
from collections import defaultdict, deque
from typing import Callable

from fastapi import HTTPException, Request, status

from app.config import settings

logger = logging.getLogger(__name__)


class RateLimiter:
    """Sliding window of request timestamps per client IP.

    A rejected request is not counted.  The 429 carries ``Retry-After``:
    whole seconds until the oldest request in the window expires.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = defaultdict(deque)

    @staticmethod
    def client_key(request: Request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    def retry_after(self, key: str) -> int:
        """Seconds until *key* may send again; 0 when it may send now."""
        hits = self._expire(key, self._clock())
        if len(hits) < self.max_requests:
            return 0
        return max(1, math.ceil(hits[0] + self.window_seconds - self._clock()))

    def check(self, request: Request) -> None:
        key = self.client_key(request)
        hits = self._expire(key, self._clock())

        if len(hits) >= self.max_requests:
            wait = self.retry_after(key)
            logger.warning("Quote rate limit hit for %s, retry in %ds", key, wait)
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"Rate limit exceeded: {self.max_requests} quotes per {self.window_seconds:g}s",
                headers={"Retry-After": str(wait)},
            )

        hits.append(self._clock())

    def reset(self) -> None:
        self._hits.clear()

    def _expire(self, key: str, now: float) -> deque[float]:
        hits = self._hits[key]
        while hits and hits[0] <= now - self.window_seconds:
            hits.popleft()
        return hits


quote_limiter = RateLimiter(
    max_requests=settings.quote_rate_limit,
    window_seconds=settings.quote_rate_window_seconds,
)
