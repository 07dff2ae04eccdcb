"""Access logging middleware — one line per request with origin and timing."""

import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("buildezy.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, origin, path, status and duration.

    5xx is logged at ERROR, 4xx at WARNING, everything else at INFO.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s 500 %.1fms origin=%s",
                request.method,
                request.url.path,
                (time.perf_counter() - start) * 1000,
                request.headers.get("origin", "-"),
            )
            raise
        duration_ms = (time.perf_counter() - start) * 1000

        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            "%s %s %d %.1fms origin=%s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            request.headers.get("origin", "-"),
        )
        return response
