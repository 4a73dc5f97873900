"""
Rural Sports Backend: Rate Limiting Middleware
===============================================

What:  Per-IP sliding-window limiter, settings.rate_limit_requests per
       settings.rate_limit_window seconds.
How:   Each IP keeps the timestamps of its requests inside the window; a
       request arriving with the window full is answered 429 with a
       Retry-After header, without reaching the app.

Single-process only: counters live in this worker's memory.
"""

import logging
import time
from collections import defaultdict, deque
from typing import Deque, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.config import settings
from app.exceptions import RateLimitExceededError
from app.middleware.request_id import REQUEST_ID_HEADER

logger = logging.getLogger(__name__)

# Sweep idle IPs every N admitted requests
CLEANUP_INTERVAL = 1000


class RateLimitMiddleware(BaseHTTPMiddleware):

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    def __init__(self, app, **kwargs):
        super().__init__(app, **kwargs)
        self._requests: Dict[str, Deque[float]] = defaultdict(deque)
        self._admitted = 0

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        window_start = now - settings.rate_limit_window

        timestamps = self._requests[client_ip]
        while timestamps and timestamps[0] <= window_start:
            timestamps.popleft()

        if len(timestamps) >= settings.rate_limit_requests:
            retry_after = int(timestamps[0] + settings.rate_limit_window - now) + 1
            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                len(timestamps),
                settings.rate_limit_window,
            )
            # Raised exceptions never reach the app's handlers from here
            exc = RateLimitExceededError(retry_after=retry_after)
            return JSONResponse(
                status_code=429,
                content={
                    "error": "rate_limit_exceeded",
                    "message": exc.message,
                    "details": exc.context,
                    # Outside RequestIDMiddleware: only a client-sent id is known here
                    "request_id": request.headers.get(REQUEST_ID_HEADER, ""),
                },
                headers={"Retry-After": str(retry_after)},
            )

        timestamps.append(now)
        self._admitted += 1
        if self._admitted % CLEANUP_INTERVAL == 0:
            self._cleanup_inactive_ips(window_start)

        return await call_next(request)

    def _cleanup_inactive_ips(self, window_start: float) -> None:
        inactive_ips = [
            ip for ip, timestamps in self._requests.items()
            if not timestamps or timestamps[-1] <= window_start
        ]
        for ip in inactive_ips:
            del self._requests[ip]
        if inactive_ips:
            logger.debug("Cleaned up %d inactive IP entries", len(inactive_ips))
