"""
FastAPI middleware for observability.

Correlation ID injection and per-request access logging.

Dependencies: fastapi, starlette, workbench.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from workbench.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Liveness probes hit these every few seconds
QUIET_PATHS = frozenset({"/api/v1/health"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per completed request with status and latency."""

    async def dispatch(self, request: Request, call_next):
        """
        Time the request and log its outcome.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{route} failed",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": _elapsed_ms(started),
                    "error_type": type(e).__name__,
                },
            )
            raise

        level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
        if response.status_code >= 500:
            level = logging.WARNING
        logger.log(
            level,
            f"{route} -> {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Bind the caller's correlation ID (or a fresh one) for the request.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response echoing the correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
