"""Error boundary: how failures leave the service.

Domain outcomes (email taken, unknown user, wrong password) never get
here; they are ordinary 200 responses.  This module covers the rest:

- HTTPException raised by the framework (unknown route, wrong method)
  keeps its status code.
- Anything else is unexpected.  It is logged with its traceback and the
  client receives a generic 500 without internal detail.

Both share one body shape: {statusCode, message, path, timestamp}.
Request validation errors keep FastAPI's standard 422 body.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_body(request: Request, status_code: int, message: str) -> dict:
    return {
        "statusCode": status_code,
        "message": message,
        "path": request.url.path,
        "timestamp": datetime.now(UTC).isoformat(),
    }


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        _error_body(request, exc.status_code, message),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error  %s %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        _error_body(request, 500, INTERNAL_ERROR_MESSAGE),
        status_code=500,
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
