"""
Rural Sports Backend: Access Log Middleware
============================================

What:  One log line per request on the `ruralsports.access` logger:

       GET /api/events 200 12.3ms [a1b2c3d4] user=7 from 10.0.0.5

Level by status class: 5xx ERROR, 4xx WARNING, everything else INFO.
/health is not logged (probes hit it every few seconds).

Request bodies are never logged: they carry passwords, phone numbers and
health conditions.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("ruralsports.access")

SKIPPED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        # Set by get_current_user on authenticated routes
        user_id = getattr(request.state, "user_id", None)

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] user=%s from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            user_id if user_id is not None else "-",
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
                "user_id": user_id,
            },
        )
        return response
