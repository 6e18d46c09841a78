"""Middleware for logging API requests."""
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


def client_ip(request: Request):
    """Best-effort client address, honouring proxy headers."""
    # X-Forwarded-For can contain multiple IPs; the first is the original client
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.headers.get("X-Real-IP"):
        return request.headers.get("X-Real-IP").strip()
    if request.client:
        return request.client.host
    return None


class ApiRequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log every request with its status and duration."""

    async def dispatch(self, request: Request, call_next):
        """Process the request and log it."""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(
            "%s %s -> %s (%.1f ms) client=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            client_ip(request),
        )
        return response
