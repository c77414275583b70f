"""Request context middleware: request ID, timing and the access log line.

Every request gets an ID, taken from the X-Request-ID header when the
client sends one, otherwise a fresh UUID4.  The ID lives in a ContextVar
(per-task state that is safe under asyncio, unlike threading.local), and
a logging filter stamps it onto every LogRecord emitted while the request
is being handled, whichever module logs.

When the request finishes, one summary line is logged with method, path,
status code and duration as structured fields; the JSON formatter lifts
those into top-level keys.  The ID is echoed back in X-Request-ID.
"""

from __future__ import annotations

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class _RequestContextFilter(logging.Filter):
    """Attach the current request ID to every LogRecord."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get("-")  # type: ignore[attr-defined]
        return True


def install_request_id_filter() -> None:
    """Install the filter on the root handlers, once.

    Filters on a logger only see records logged directly on that logger,
    so the filter goes on the handlers instead, which see everything that
    propagates to the root.  Call after setup_logging().
    """
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, _RequestContextFilter) for f in handler.filters):
            handler.addFilter(_RequestContextFilter())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assign a request ID, time the request and log its completion."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        req_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request_id_var.set(req_id)

        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            # The catch-all handler renders the 500 outside this middleware.
            self._log_completion(request, req_id, 500, start)
            raise

        self._log_completion(request, req_id, response.status_code, start)
        response.headers["X-Request-ID"] = req_id
        return response

    @staticmethod
    def _log_completion(
        request: Request, req_id: str, status_code: int, start: float
    ) -> None:
        duration_ms = round((time.monotonic() - start) * 1000, 1)
        logger.info(
            "%s %s → %d (%.1fms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
            extra={
                "request_id": req_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            },
        )
