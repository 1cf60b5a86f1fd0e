"""Pydantic request/response schemas for the feedback API.

Feedback and statistics bodies reuse the domain models
(:class:`FeedbackView`, :class:`AggregateStatistics`) since they already
carry the camelCase aliases; this module adds the envelope types.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SubmitFeedbackRequest(BaseModel):
    """Body of ``POST /api/v1/feedback``.

    Documented for the OpenAPI schema only; the route parses the raw body
    itself so that malformed and incomplete bodies map onto the service's
    own 400 messages rather than FastAPI's 422.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str = Field(..., max_length=1000, description="Free-text feedback; trimmed before use.")
    session_id: str = Field(..., description="Opaque submitter session id.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str


class HealthResponse(BaseModel):
    """Liveness and wiring information."""

    status: str = "ok"
    version: str
    providers: dict[str, str] = Field(default_factory=dict)
