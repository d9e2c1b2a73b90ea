"""
HTTP middleware for request tracing and access logging.

CorrelationMiddleware binds an X-Correlation-ID to each request (taken from
the caller or generated) and echoes it on the response.
RequestLoggingMiddleware writes one line when a request starts and one when
it finishes, with status and latency.

Dependencies: starlette, backend.observability.correlation
System role: Per-request observability
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from backend.observability.correlation import correlation_id_ctx, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log for every request, including ones that raise."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        method = request.method
        path = request.url.path

        logger.info(
            f"{method} {path}",
            extra={
                "method": method,
                "path": path,
                "client_host": request.client.host if request.client else None,
                "content_length": request.headers.get("content-length"),
            },
        )

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - unhandled {type(e).__name__}",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": _elapsed_ms(started),
                    "error_type": type(e).__name__,
                },
            )
            raise

        logger.info(
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "process_time_ms": _elapsed_ms(started),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """
    Bind a correlation ID for the lifetime of a request.

    The previous context value is restored afterwards so IDs never leak
    between requests served by the same worker.
    """

    async def dispatch(self, request: Request, call_next):
        token = correlation_id_ctx.set("")
        try:
            correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
            response: Response = await call_next(request)
        finally:
            correlation_id_ctx.reset(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
