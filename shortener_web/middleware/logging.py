"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable, Optional

from shortener.common.timeutils import to_iso_z, utcnow


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging.

    When ``access_log_file`` is given, every request is also appended to it
    as ``[<ISO timestamp>] <METHOD> <path?query>``.
    """

    def __init__(
        self,
        app,
        logger: logging.Logger = None,
        access_log_file: Optional[str] = None,
    ):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or logging.getLogger("url_shortener.web")
        self.access_log_file = access_log_file

    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response."""
        start_time = time.time()

        client_ip = request.client.host if request.client else "unknown"
        self.logger.info(f"Request: {request.method} {request.url.path} from {client_ip}")

        if self.access_log_file:
            self._append_access_line(request)

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000

        self.logger.info(
            f"Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )

        return response

    def _append_access_line(self, request: Request) -> None:
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        line = f"[{to_iso_z(utcnow())}] {request.method} {target}\n"
        try:
            with open(self.access_log_file, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            self.logger.error(f"Failed to write access log {self.access_log_file}: {e}")
