"""HTTP middleware: per-request log context, portal response headers, sanitized 500s.

Starlette runs the most recently added middleware first, so the stack
built by ``register_middleware()`` is, from the outside in:
    1. RequestContextMiddleware  → X-Request-ID, structlog context, access log
    2. ResponseHeadersMiddleware → X-Portal-Env and browser hardening headers
    3. ErrorHandlerMiddleware    → unhandled exception → JSON 500

Because the error handler sits innermost, a failed request still carries
its request id, is logged with its real 500 status, and gets the headers.

Called by: main.py (``register_middleware()``)
Depends on: config.py (Settings)
"""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import get_settings

logger = structlog.get_logger()

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind the request id and caller to structlog for the life of a request.

    A client-supplied ``X-Request-ID`` is reused, otherwise a UUID4 is
    minted. Every log line emitted while handling the request carries
    ``request_id`` (and ``user_id`` when the mock auth header is present).
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        if user_id := request.headers.get("X-User-Id"):
            structlog.contextvars.bind_contextvars(user_id=user_id)

        start = time.perf_counter()
        try:
            response = await call_next(request)
            logger.info(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["X-Request-ID"] = request_id
        return response


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Tag responses with the deployment name and the security headers."""

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        response = await call_next(request)
        response.headers["X-Portal-Env"] = get_settings().app_env
        response.headers.update(SECURITY_HEADERS)
        return response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn unhandled exceptions into a generic JSON 500.

    The traceback goes to the log; the client only sees the error code.
    """

    async def dispatch(self, request: Request, call_next):  # noqa: ANN001
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("unhandled_error", error=str(exc), path=request.url.path)
            return JSONResponse(
                status_code=500,
                content={
                    "error": {
                        "code": "INTERNAL_ERROR",
                        "message": "The portal could not complete this request.",
                    }
                },
            )


def register_middleware(app: FastAPI) -> None:
    """Install the middleware stack, innermost first."""
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(ResponseHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)
