"""Domain models for the feedback service."""

from feedback_service.models.feedback import (
    STATISTICS_ID,
    AggregateStatistics,
    FeedbackRecord,
    FeedbackView,
    Sentiment,
    SentimentResult,
    SubmissionResult,
    utc_now_iso,
)
from feedback_service.models.result import SUCCESS, Failure, OperationResult, Success

__all__ = [
    "STATISTICS_ID",
    "SUCCESS",
    "AggregateStatistics",
    "Failure",
    "FeedbackRecord",
    "FeedbackView",
    "OperationResult",
    "Sentiment",
    "SentimentResult",
    "SubmissionResult",
    "Success",
    "utc_now_iso",
]
