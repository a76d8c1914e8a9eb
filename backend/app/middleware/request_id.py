"""
FAQDesk Backend: Request ID Middleware
========================================

What:  Assigns a correlation ID to each incoming request and echoes it back.
How:   Uses the client's X-Request-ID header when present, otherwise a short
       generated UUID; stores it in a ContextVar and on request.state, and
       sets it as a response header.
Who:   Applied to every request; read by the access log and error handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if it sent one
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store it in request_id_var and request.state.request_id
        4. Return it in the X-Request-ID response header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
