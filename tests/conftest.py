"""Shared pytest fixtures for the feedback service test suite."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from feedback_service.interfaces.feedback_store import IFeedbackStore
from feedback_service.interfaces.sentiment_classifier import ISentimentClassifier
from feedback_service.interfaces.statistics_store import IStatisticsStore
from feedback_service.models.feedback import (
    AggregateStatistics,
    FeedbackRecord,
    Sentiment,
    SentimentResult,
)
from feedback_service.models.result import SUCCESS
from feedback_service.providers.feedback_store.sqlite_feedback_store import SQLiteFeedbackStore
from feedback_service.providers.statistics.sqlite_statistics_store import SQLiteStatisticsStore
from feedback_service.utils.idempotency import compute_idempotency_key


def make_record(
    record_id: str = "rec-001",
    text: str = "Great!",
    session_id: str = "s1",
    sentiment: Sentiment = Sentiment.GOOD,
    confidence: float = 0.95,
    timestamp: str = "2026-01-15T12:00:00.000Z",
) -> FeedbackRecord:
    """Build a FeedbackRecord whose idempotency key matches *session_id* + *text*."""
    return FeedbackRecord(
        id=record_id,
        idempotency_key=compute_idempotency_key(session_id, text),
        text=text,
        sentiment=sentiment,
        confidence=confidence,
        timestamp=timestamp,
    )


# ---------------------------------------------------------------------------
# Mock collaborator fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_classifier() -> ISentimentClassifier:
    """Mock classifier returning Good / 0.95 by default.

    Override with ``mock_classifier.classify.return_value = ...`` or
    ``mock_classifier.classify.side_effect = ...``.
    """
    mock = MagicMock(spec=ISentimentClassifier)
    mock.get_provider_name.return_value = "mock-classifier"
    mock.classify = AsyncMock(
        return_value=SentimentResult(sentiment=Sentiment.GOOD, confidence=0.95)
    )
    return mock


@pytest.fixture
def mock_feedback_store() -> IFeedbackStore:
    """Mock feedback store: no existing records, every put succeeds."""
    mock = MagicMock(spec=IFeedbackStore)
    mock.get_provider_name.return_value = "mock-feedback-store"
    mock.find_by_idempotency_key = AsyncMock(return_value=None)
    mock.put = AsyncMock(return_value=SUCCESS)
    mock.scan_all = AsyncMock(return_value=[])
    mock.scan_by_sentiment = AsyncMock(return_value=[])
    mock.initialize = AsyncMock()
    return mock


@pytest.fixture
def mock_statistics_store() -> IStatisticsStore:
    """Mock statistics store: every adjust succeeds, reads return zeros."""
    mock = MagicMock(spec=IStatisticsStore)
    mock.get_provider_name.return_value = "mock-statistics-store"
    mock.adjust = AsyncMock(return_value=SUCCESS)
    mock.read = AsyncMock(return_value=AggregateStatistics.zero())
    mock.initialize = AsyncMock()
    return mock


# ---------------------------------------------------------------------------
# Real SQLite stores on temporary files
# ---------------------------------------------------------------------------


@pytest.fixture
async def feedback_store(tmp_path: Path) -> SQLiteFeedbackStore:
    store = SQLiteFeedbackStore(db_path=tmp_path / "feedback.db")
    await store.initialize()
    return store


@pytest.fixture
async def statistics_store(tmp_path: Path) -> SQLiteStatisticsStore:
    store = SQLiteStatisticsStore(db_path=tmp_path / "statistics.db")
    await store.initialize()
    return store
