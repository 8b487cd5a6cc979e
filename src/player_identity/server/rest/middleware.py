"""Request timing middleware."""

from __future__ import annotations

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)

# Polled by load balancers; logged at debug.
_QUIET_PATHS = frozenset({"/api/v1/health", "/api/v1/status"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its duration and expose the timing as a header."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        elapsed = (time.monotonic() - start) * 1000
        response.headers["X-Elapsed-Ms"] = f"{elapsed:.1f}"
        level = logging.DEBUG if request.url.path in _QUIET_PATHS else logging.INFO
        logger.log(
            level,
            "%s %s → %d (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response
