"""Request logging middleware.

Gives every request a correlation ID (taken from X-Correlation-ID when the
client sends one), echoes it back on the response, and writes one
``request_started`` and one ``request_completed``/``request_failed`` entry
per request.
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ballot_ledger.infrastructure.observability.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = ["CORRELATION_HEADER", "LoggingMiddleware"]


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Correlation ID propagation and per-request access logging."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        correlation_id = (
            request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        )
        token = set_correlation_id(correlation_id)

        log = structlog.get_logger().bind(
            component="http",
            method=request.method,
            path=request.url.path,
        )
        log.info("request_started")
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                duration_ms=_elapsed_ms(started),
                error_type=type(exc).__name__,
            )
            raise
        finally:
            reset_correlation_id(token)

        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
            correlation_id=correlation_id,
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
