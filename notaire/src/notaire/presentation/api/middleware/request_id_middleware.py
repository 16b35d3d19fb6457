"""
Request ID middleware.

Tags every request with an ID (the caller's X-Request-ID or a fresh UUID)
so log lines written while serving it can be correlated, and logs one
summary line per request.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from notaire.infrastructure.monitoring.logger import get_logger, set_request_id

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind a request ID to the logging context and echo it back."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_id(request.headers.get(REQUEST_ID_HEADER))
        started = time.perf_counter()

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
