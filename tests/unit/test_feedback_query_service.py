"""Unit tests for FeedbackQueryService."""

from __future__ import annotations

import pytest

from feedback_service.models.feedback import AggregateStatistics, FeedbackView, Sentiment
from feedback_service.services.feedback_query_service import FeedbackQueryService
from feedback_service.utils.errors import StoreError, ValidationError
from tests.conftest import make_record


@pytest.fixture
def service(mock_feedback_store, mock_statistics_store) -> FeedbackQueryService:
    return FeedbackQueryService(
        feedback_store=mock_feedback_store,
        statistics_store=mock_statistics_store,
    )


class TestListFeedback:
    @pytest.mark.asyncio
    async def test_returns_public_views(self, service, mock_feedback_store) -> None:
        mock_feedback_store.scan_all.return_value = [
            make_record(record_id="b", text="Bad", sentiment=Sentiment.BAD),
            make_record(record_id="a", text="Good"),
        ]

        views = await service.list_feedback()

        assert [v.id for v in views] == ["b", "a"]
        assert all(isinstance(v, FeedbackView) for v in views)
        assert "idempotencyKey" not in views[0].model_dump(by_alias=True)

    @pytest.mark.asyncio
    async def test_empty_store(self, service) -> None:
        assert await service.list_feedback() == []

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, service, mock_feedback_store) -> None:
        mock_feedback_store.scan_all.side_effect = StoreError("Failed to get feedback")
        with pytest.raises(StoreError):
            await service.list_feedback()


class TestListFeedbackBySentiment:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [None, ""])
    async def test_missing_sentiment(self, service, mock_feedback_store, value) -> None:
        with pytest.raises(ValidationError, match="sentiment query param is required"):
            await service.list_feedback_by_sentiment(value)
        mock_feedback_store.scan_by_sentiment.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["good", "GOOD", "Positive", "Mixed"])
    async def test_invalid_sentiment(self, service, mock_feedback_store, value) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await service.list_feedback_by_sentiment(value)
        assert exc_info.value.message == "sentiment must be one of {Good, Bad, Neutral}"
        mock_feedback_store.scan_by_sentiment.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_queries_matching_bucket(self, service, mock_feedback_store) -> None:
        mock_feedback_store.scan_by_sentiment.return_value = [
            make_record(record_id="n1", sentiment=Sentiment.NEUTRAL),
        ]

        views = await service.list_feedback_by_sentiment("Neutral")

        mock_feedback_store.scan_by_sentiment.assert_awaited_once_with(Sentiment.NEUTRAL)
        assert [v.id for v in views] == ["n1"]


class TestGetStatistics:
    @pytest.mark.asyncio
    async def test_returns_store_counters(self, service, mock_statistics_store) -> None:
        stats = AggregateStatistics(
            total_count=3, good_count=2, bad_count=1, neutral_count=0,
            last_updated="2026-01-15T12:00:00.000Z",
        )
        mock_statistics_store.read.return_value = stats

        assert await service.get_statistics() == stats
