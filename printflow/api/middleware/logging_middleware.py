"""Request logging middleware.

Each request gets a correlation ID (taken from X-Correlation-ID or
freshly generated) and a set of structlog context variables, so log
entries written by the workflow engine and the notification dispatcher
while serving the request can be tied back to it and to the acting user.

    app.add_middleware(LoggingMiddleware)
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from printflow.api.dependencies.actor import ACTOR_ID_HEADER, ACTOR_ROLE_HEADER
from printflow.infrastructure.observability.correlation import (
    generate_correlation_id,
    set_correlation_id,
)

CORRELATION_HEADER = "X-Correlation-ID"

log = structlog.get_logger()


class LoggingMiddleware(BaseHTTPMiddleware):
    """Correlation ID propagation and per-request access logging.

    Binds ``http_method``, ``http_path``, ``actor_id`` and ``actor_role``
    as structlog context variables for the duration of the request and
    echoes the correlation ID in the response headers.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            http_method=request.method,
            http_path=request.url.path,
            actor_id=request.headers.get(ACTOR_ID_HEADER),
            actor_role=request.headers.get(ACTOR_ROLE_HEADER),
        )

        log.debug("request_received")
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
                error_type=type(exc).__name__,
            )
            raise
        finally:
            structlog.contextvars.clear_contextvars()

        log.info(
            "request_served",
            http_method=request.method,
            http_path=request.url.path,
            status_code=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
