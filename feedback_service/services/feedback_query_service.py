"""Read side for the admin view: feedback listings and aggregate statistics."""

from __future__ import annotations

from feedback_service.interfaces.feedback_store import IFeedbackStore
from feedback_service.interfaces.statistics_store import IStatisticsStore
from feedback_service.models.feedback import AggregateStatistics, FeedbackView, Sentiment
from feedback_service.utils.errors import ValidationError

_VALID_SENTIMENTS = {s.value: s for s in Sentiment}


class FeedbackQueryService:
    """Pass-through reads that only ever expose the public projection."""

    def __init__(
        self,
        feedback_store: IFeedbackStore,
        statistics_store: IStatisticsStore,
    ) -> None:
        self._feedback_store = feedback_store
        self._statistics_store = statistics_store

    async def list_feedback(self) -> list[FeedbackView]:
        records = await self._feedback_store.scan_all()
        return [r.to_view() for r in records]

    async def list_feedback_by_sentiment(self, sentiment: str | None) -> list[FeedbackView]:
        """Return feedback labelled *sentiment* (exact, case-sensitive match).

        Raises
        ------
        ValidationError
            If *sentiment* is missing or not one of Good, Bad, Neutral.
            The store is not queried in that case.
        """
        if not sentiment:
            raise ValidationError("sentiment query param is required")
        bucket = _VALID_SENTIMENTS.get(sentiment)
        if bucket is None:
            raise ValidationError("sentiment must be one of {Good, Bad, Neutral}")

        records = await self._feedback_store.scan_by_sentiment(bucket)
        return [r.to_view() for r in records]

    async def get_statistics(self) -> AggregateStatistics:
        return await self._statistics_store.read()
