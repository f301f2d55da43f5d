"""FastAPI middleware for request tracing and logging."""

import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID tracing to all requests.

    - Uses the caller's X-Request-ID when present, otherwise a new UUID4
    - Binds request_id to the structlog context for the request's duration
    - Echoes the id back in the X-Request-ID response header
    - Logs request start and end with duration
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        """Process request with tracing context."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )

        logger.info("Request started")

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start_time) * 1000

            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "Request failed",
                exc_info=exc,
                duration_ms=round(duration_ms, 2),
            )
            raise

        finally:
            # Prevent context leaking into the next request on this worker
            structlog.contextvars.clear_contextvars()
