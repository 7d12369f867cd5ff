"""
Faithtrack Backend: Request Logging Middleware
================================================

What:  One access-log line per HTTP request with status and duration.
How:   Measures wall time around call_next and logs on the
       "faithtrack.access" logger, picking the level from the status code.

What is logged:
    method, path, status, duration, client IP and request ID.
    Request bodies are never logged: search requests carry the user's
    xAI API key and journal entries are private.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from faithtrack.middleware.request_id import request_id_var

logger = logging.getLogger("faithtrack.access")

# Probed every few seconds by Docker; logging them drowns real traffic
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    Levels:
        5xx → ERROR
        4xx → WARNING
        else → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
