"""Utility modules for the feedback service.

- **errors** -- exception hierarchy rooted at FeedbackServiceError; client
  errors (400) are separated from dependency failures (500).
- **idempotency** -- text normalisation and the SHA-256 idempotency key.
- **logging** -- structlog setup: coloured console output in development,
  structured JSON in production.
"""

from feedback_service.utils.errors import (
    ClassificationError,
    ConfigurationError,
    DependencyFailure,
    FeedbackServiceError,
    LLMError,
    MalformedRequestError,
    StoreError,
    ValidationError,
)
from feedback_service.utils.idempotency import compute_idempotency_key, normalize_text
from feedback_service.utils.logging import configure_logging, get_logger

__all__ = [
    "ClassificationError",
    "ConfigurationError",
    "DependencyFailure",
    "FeedbackServiceError",
    "LLMError",
    "MalformedRequestError",
    "StoreError",
    "ValidationError",
    "compute_idempotency_key",
    "configure_logging",
    "get_logger",
    "normalize_text",
]
