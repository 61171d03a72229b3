"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, bg_remover.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from bg_remover.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per jobs API call with the caller and outcome.

    The caller is read from the same gateway header get_current_user trusts,
    so anonymous requests show up as user_id=None next to their 401.
    """

    def __init__(self, app, user_header: str = "X-User-ID"):
        super().__init__(app)
        self.user_header = user_header

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        context = {
            "method": request.method,
            "path": request.url.path,
            "user_id": request.headers.get(self.user_header, "").strip() or None,
        }

        try:
            response: Response = await call_next(request)
        except Exception:
            context["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            logger.exception("%s %s failed", context["method"], context["path"], extra=context)
            raise

        context["status_code"] = response.status_code
        context["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (user=%s)",
            context["method"],
            context["path"],
            response.status_code,
            context["user_id"] or "anonymous",
            extra=context,
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
