"""HTTP middleware binding a correlation id to every content request."""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response

from scripture_reader.core.logging import correlation_id_context, get_logger

logger = get_logger(__name__)

CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")


def request_correlation_id(request: Request) -> str:
    """Reuse the caller's request id when one is sent, else mint one."""
    for header in CORRELATION_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex


async def correlation_id_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log resolver activity under the request's correlation id and echo it back."""
    correlation_id = request_correlation_id(request)
    started = time.perf_counter()
    with correlation_id_context(correlation_id):
        response = await call_next(request)
        logger.info(
            "request completed",
            extra={
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
            },
        )
    for header in CORRELATION_HEADERS:
        response.headers.setdefault(header, correlation_id)
    return response


__all__ = ["CORRELATION_HEADERS", "correlation_id_middleware", "request_correlation_id"]
