"""Request logging middleware."""

from __future__ import annotations

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from campusconnect.logging import sanitize_for_log

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with method, path, client, status and timing."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        client_ip = request.client.host if request.client else "-"
        path = sanitize_for_log(str(request.url.path))
        if request.url.query:
            path = f"{path}?{sanitize_for_log(request.url.query)}"

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(
                "%s %s - IP: %s - failed after %.1fms", request.method, path, client_ip, elapsed_ms
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s - IP: %s - %d (%.1fms)",
            request.method,
            path,
            client_ip,
            response.status_code,
            elapsed_ms,
        )
        return response
