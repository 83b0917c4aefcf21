"""Request Logging — one log line before and one after every HTTP request.

Invariants:
    - "started" line carries method and path; "completed" line adds status_code and elapsed_ms
    - An exception escaping the app is logged as status 500 and re-raised unchanged
    - Logging never changes the response
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and elapsed milliseconds per request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        method = request.method
        path = request.url.path
        logger.info(
            f"Request started: {method} {path}",
            extra={"method": method, "path": path},
        )
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.info(
                f"Request completed: {method} {path} status={status_code} "
                f"elapsed={elapsed_ms}ms",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": status_code,
                    "elapsed_ms": elapsed_ms,
                },
            )
