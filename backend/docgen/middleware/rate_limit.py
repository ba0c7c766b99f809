from __future__ import annotations

import time
from collections import defaultdict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

_EXEMPT_PATHS: frozenset[str] = frozenset({"/health", "/health/detail", "/openapi.json", "/docs", "/redoc"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    """In-memory per-IP sliding-window rate limiter."""

    def __init__(self, app, max_requests: int = 60, window_seconds: int = 60):
        super().__init__(app)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._requests: dict[str, list[float]] = defaultdict(list)

    async def dispatch(self, request: Request, call_next):
        if request.url.path in _EXEMPT_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        window_start = time.time() - self.window_seconds

        recent = [t for t in self._requests[client_ip] if t > window_start]
        if len(recent) >= self.max_requests:
            self._requests[client_ip] = recent
            return JSONResponse(
                status_code=429,
                content={"detail": "Rate limit exceeded. Try again later."},
                headers={"Retry-After": str(self.window_seconds)},
            )

        recent.append(time.time())
        self._requests[client_ip] = recent
        return await call_next(request)
