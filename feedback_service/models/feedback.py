"""Feedback domain models.

# ─── ARCHITECTURE ROLE ───────────────────────────────────────────────
#
# Layer: Models (bottom of the dependency graph; no imports from upper layers).
#
# Frozen Pydantic v2 models for the two kinds of persisted state:
#
#   - FeedbackRecord       one row per accepted submission, never mutated
#   - AggregateStatistics  the single "global" running-total row
#
# JSON field names are camelCase (``sessionId``, ``goodCount``...) to
# match what the form and the admin dashboard exchange with the API, so
# every model uses a camelCase alias generator.  Python code keeps
# snake_case attribute names.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

STATISTICS_ID = "global"


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Sentiment(str, Enum):
    """Coarse sentiment bucket, used both as a stored label and a counter dimension."""

    GOOD = "Good"
    BAD = "Bad"
    NEUTRAL = "Neutral"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SentimentResult(_CamelModel):
    """Classifier output for one piece of text."""

    sentiment: Sentiment
    confidence: float = Field(ge=0.0, le=1.0)


class FeedbackView(_CamelModel):
    """Public projection of a feedback record.

    This is the only shape that leaves the service; the idempotency key
    is deliberately absent.
    """

    id: str
    text: str
    sentiment: Sentiment
    confidence: float = Field(ge=0.0, le=1.0)
    timestamp: str


class FeedbackRecord(_CamelModel):
    """A persisted feedback submission.

    ``id`` is a fresh UUID per record.  ``idempotency_key`` is the SHA-256
    digest of session id and trimmed text (see
    :func:`feedback_service.utils.idempotency.compute_idempotency_key`).
    """

    id: str
    idempotency_key: str
    text: str
    sentiment: Sentiment
    confidence: float = Field(ge=0.0, le=1.0)
    timestamp: str

    def to_view(self) -> FeedbackView:
        return FeedbackView(
            id=self.id,
            text=self.text,
            sentiment=self.sentiment,
            confidence=self.confidence,
            timestamp=self.timestamp,
        )


class AggregateStatistics(_CamelModel):
    """Running totals across all accepted feedback.

    ``total_count`` equals the sum of the bucket counts under ideal
    execution only; a failed compensation can leave them apart.
    """

    id: str = STATISTICS_ID
    total_count: int = 0
    good_count: int = 0
    bad_count: int = 0
    neutral_count: int = 0
    last_updated: str = Field(default_factory=utc_now_iso)

    @classmethod
    def zero(cls) -> AggregateStatistics:
        """All-zero statistics stamped with the current time."""
        return cls(last_updated=utc_now_iso())

    def count_for(self, sentiment: Sentiment) -> int:
        if sentiment is Sentiment.GOOD:
            return self.good_count
        if sentiment is Sentiment.BAD:
            return self.bad_count
        return self.neutral_count


class SubmissionResult(BaseModel):
    """Outcome of a submission: the public record and whether it was new."""

    model_config = ConfigDict(frozen=True)

    feedback: FeedbackView
    created: bool
