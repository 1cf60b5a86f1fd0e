"""API middleware for CORS, request logging and error handling.

Starlette middleware is a stack (last added, first executed).
:func:`install_middleware` adds them so a request flows

    Client → CORS → CORSHeaders → RequestLogging → ErrorHandling → route

which means RequestLogging sees the final status code even when
ErrorHandling turned an exception into a JSON error, and every response,
errors included, leaves with the cross-origin headers.
"""

from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from feedback_service.api.schemas import ErrorResponse
from feedback_service.utils.errors import (
    FeedbackServiceError,
    MalformedRequestError,
    ValidationError,
)
from feedback_service.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------


def configure_cors(app: FastAPI, *, allowed_origins: list[str] | None = None) -> None:
    """Add Starlette's CORS middleware (answers ``OPTIONS`` preflight requests).

    Parameters
    ----------
    app:
        The FastAPI application instance.
    allowed_origins:
        Explicit list of allowed origins.  Defaults to ``["*"]``.
    """
    origins = allowed_origins or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp the cross-origin headers on every response.

    ``CORSMiddleware`` only adds them when the request carries an
    ``Origin`` header; the dashboard's clients expect them unconditionally.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)
        for name, value in _CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


# ---------------------------------------------------------------------------
# Request Logging
# ---------------------------------------------------------------------------


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with method, path, status code, and duration."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None

        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            status_code = response.status_code if response else 500
            _logger.info(
                "http_request",
                method=request.method,
                path=str(request.url.path),
                status=status_code,
                duration_ms=duration_ms,
            )


# ---------------------------------------------------------------------------
# Error Handling
# ---------------------------------------------------------------------------


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn exceptions into ``{"error": ...}`` JSON bodies.

    Client errors (:class:`MalformedRequestError`, :class:`ValidationError`)
    become a 400 carrying their message.  Everything else becomes a 500
    with a generic message; the detail is logged server-side only.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except (MalformedRequestError, ValidationError) as exc:
            _logger.info(
                "client_error",
                error_type=type(exc).__name__,
                message=exc.message,
                path=str(request.url.path),
            )
            return _error_response(400, exc.message)
        except FeedbackServiceError as exc:
            _logger.error(
                "application_error",
                error_type=type(exc).__name__,
                message=exc.message,
                provider=exc.provider_name,
                path=str(request.url.path),
            )
            return _error_response(500, INTERNAL_ERROR_MESSAGE)
        except Exception:
            _logger.exception("unhandled_error", path=str(request.url.path))
            return _error_response(500, INTERNAL_ERROR_MESSAGE)


def install_middleware(app: FastAPI, *, allowed_origins: list[str] | None = None) -> None:
    """Add the full middleware stack in the order documented above."""
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CORSHeadersMiddleware)
    configure_cors(app, allowed_origins=allowed_origins)
