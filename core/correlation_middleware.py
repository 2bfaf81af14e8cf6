"""
Correlation ID middleware.

Binds a per-request correlation id into structlog's contextvars so every log
line emitted while handling the request carries it.
"""

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:16]

        structlog.contextvars.bind_contextvars(
            correlation_id=correlation_id,
            path=request.url.path,
        )
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("correlation_id", "path")

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
