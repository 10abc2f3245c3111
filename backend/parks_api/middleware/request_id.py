"""
National Parks API — Request Correlation IDs
==============================================

Every catalog lookup gets a short ID that appears in the access log line,
in any handler log (validation warnings, 500 tracebacks) and in the
X-Request-ID response header. A client reporting "GET /parks/7 returned 500"
can quote the header and the matching server lines are one grep away.

A caller that already has an ID (a gateway, a load balancer) sends it in
X-Request-ID and it is reused unchanged; otherwise an 8-character uuid4
prefix is minted.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Read by the exception handlers in main.py and by the access logger
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag the request with a correlation ID and echo it on the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
