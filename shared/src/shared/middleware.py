"""ASGI middleware: request correlation and the CORS/error edge."""
import uuid
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from shared.logging import clear_request_context, set_request_context

logger = structlog.get_logger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def get_request_id_from_headers(request: Request) -> str | None:
    """Extract X-Request-ID from request headers."""
    return request.headers.get("X-Request-ID")


def get_trace_id_from_headers(request: Request) -> str | None:
    """Extract X-Trace-ID from request headers."""
    return request.headers.get("X-Trace-ID")


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Add request_id and trace_id to context and response headers."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id_from_headers(request) or str(uuid.uuid4())
        trace_id = get_trace_id_from_headers(request) or request_id
        set_request_context(request_id=request_id, trace_id=trace_id)
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Trace-ID"] = trace_id
            return response
        finally:
            clear_request_context()


def error_message(exc: BaseException) -> str:
    """Best-effort human readable message for an exception."""
    return str(exc) or "Unknown error"


class EdgeMiddleware(BaseHTTPMiddleware):
    """Answer preflight probes, stamp CORS headers and turn uncaught failures into JSON 500s.

    Preflight (OPTIONS) requests never reach the application. Every other
    response, including the error body, carries ``CORS_HEADERS``.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception("unhandled_error", path=request.url.path, error=error_message(e))
            return JSONResponse(
                status_code=500,
                content={"error": "Internal Server Error", "message": error_message(e)},
                headers=CORS_HEADERS,
            )
        for key, value in CORS_HEADERS.items():
            response.headers[key] = value
        return response
