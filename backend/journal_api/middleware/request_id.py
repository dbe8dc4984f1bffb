"""
Journal API: Request ID Middleware
===================================

What:  Assigns a short correlation ID to each request and echoes it in the
       X-Request-ID response header.
How:   Reuses a client-supplied X-Request-ID when it is a plain token,
       otherwise generates one; stores it in a ContextVar for loggers and
       exception handlers.
"""

import re
import uuid
from typing import Optional
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Client IDs end up in log lines and error bodies
_CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(header_value: Optional[str]) -> str:
    """Returns the client's ID when it is a short plain token, else a fresh one."""
    if header_value and _CLIENT_ID_PATTERN.match(header_value):
        return header_value
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get("X-Request-ID"))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
