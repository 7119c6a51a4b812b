"""
CodeBoard Backend: Request ID Middleware
=========================================

What:  Gives every request a short correlation ID.
Why:   Ties every log line of one request to its error body, so a user can
       quote the ID from an error message.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates one. The ID is stored in a ContextVar (read by the access
       logger and the exception handlers), on request.state, and echoed back
       in the X-Request-ID response header.
Who:   Applied to every request via Starlette middleware.
When:  Outermost middleware, so everything after it sees the ID.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns and propagates the X-Request-ID correlation header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or new_request_id()
        # Left set after the response so the outermost 500 handler still sees it.
        request_id_var.set(rid)
        request.state.request_id = rid
        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
