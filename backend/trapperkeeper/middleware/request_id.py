"""
Trapper Keeper Backend — Request ID Middleware
===============================================

What:  Tags each request with a short correlation id and echoes it back.
Why:   Lets access-log lines, error logs and client bug reports be matched up.
How:   Reuses an incoming X-Request-ID header or generates one, stores it in a
       ContextVar and on request.state, and sets it on the response.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns a request id to every request.

    A client-supplied X-Request-ID is kept as-is so a frontend can trace a
    user action through to the server log; otherwise the first 8 hex digits
    of a UUID4 are used.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
