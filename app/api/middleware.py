"""
Custom middleware untuk request logging
"""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and elapsed time of every request"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.time() - start_time) * 1000
            logger.error(f"{request.method} {request.url.path} failed after {elapsed_ms:.1f}ms: {e}")
            raise

        elapsed_ms = (time.time() - start_time) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)")
        return response
