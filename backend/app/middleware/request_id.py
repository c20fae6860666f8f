"""
Employee Directory Backend - Request ID Middleware
==================================================

What:  Tags every request with a short correlation id and echoes it back in
       the X-Request-ID response header.
How:   Reuses the client's X-Request-ID when sent, otherwise generates one;
       stores it in a ContextVar (for loggers and exception handlers) and on
       request.state (for route handlers).
When:  Outermost application middleware, so every log line of a request can
       carry the same id.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


def new_request_id() -> str:
    """First 8 characters of a random UUID4."""
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns, propagates and echoes the per-request correlation id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
