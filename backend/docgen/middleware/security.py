from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from docgen.config import settings


class SecurityMiddleware(BaseHTTPMiddleware):
    """Reject oversized request bodies before they reach the parser."""

    def __init__(self, app, max_body_size: int | None = None):
        super().__init__(app)
        self.max_body_size = max_body_size or settings.max_request_size

    async def dispatch(self, request: Request, call_next):
        if request.method in ("POST", "PUT"):
            content_length = request.headers.get("content-length")
            if content_length and content_length.isdigit() and int(content_length) > self.max_body_size:
                return JSONResponse(
                    status_code=413,
                    content={"detail": f"Request body too large. Maximum size: {self.max_body_size} bytes."},
                )

        return await call_next(request)
