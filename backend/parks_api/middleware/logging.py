"""
National Parks API — Access Log
=================================

Writes one line per catalog request to the `parks_api.access` logger:

    GET /parks/search/grand%20can 200 0.4ms [1f3a9c2e] from 10.0.0.7

The level follows the outcome. A lookup of a missing park or state is a
normal 404 and lands at WARNING together with malformed ids (400) and
unknown routes. Only 5xx responses reach ERROR. Successful list, lookup and
search calls are INFO.

/health is left out of the log; orchestrators poll it constantly.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from parks_api.middleware.request_id import request_id_var

logger = logging.getLogger("parks_api.access")


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, raw path, status, latency, request ID and client for each request."""

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        # The raw path keeps search queries percent-encoded on a single line
        raw_path = request.scope.get("raw_path", b"").decode("latin-1") or request.url.path
        client = request.client.host if request.client else "unknown"
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        rid = request_id_var.get("")
        status = response.status_code
        route = request.scope.get("route")
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            raw_path,
            status,
            elapsed_ms,
            rid,
            client,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": raw_path,
                "route": getattr(route, "path", None),
                "status": status,
                "duration_ms": round(elapsed_ms, 2),
                "client_ip": client,
            },
        )
        return response
