"""Feedback service API layer: routes, schemas and middleware."""

from feedback_service.api.middleware import (
    CORSHeadersMiddleware,
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
    install_middleware,
)
from feedback_service.api.routes import router
from feedback_service.api.schemas import ErrorResponse, HealthResponse, SubmitFeedbackRequest

__all__ = [
    "CORSHeadersMiddleware",
    "ErrorHandlingMiddleware",
    "ErrorResponse",
    "HealthResponse",
    "RequestLoggingMiddleware",
    "SubmitFeedbackRequest",
    "configure_cors",
    "install_middleware",
    "router",
]
