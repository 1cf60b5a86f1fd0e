"""Unit tests for the SQLite statistics store."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from feedback_service.models.feedback import STATISTICS_ID, Sentiment
from feedback_service.providers.statistics.sqlite_statistics_store import SQLiteStatisticsStore
from feedback_service.utils.errors import StoreError


class TestRead:
    @pytest.mark.asyncio
    async def test_missing_row_reads_as_zero(self, statistics_store: SQLiteStatisticsStore) -> None:
        stats = await statistics_store.read()

        assert stats.id == STATISTICS_ID
        assert (stats.total_count, stats.good_count, stats.bad_count, stats.neutral_count) == (
            0, 0, 0, 0,
        )
        assert stats.last_updated.endswith("Z")

    @pytest.mark.asyncio
    async def test_read_without_table_raises(self, tmp_path: Path) -> None:
        store = SQLiteStatisticsStore(db_path=tmp_path / "uninitialised.db")
        with pytest.raises(StoreError, match="Failed to get statistics"):
            await store.read()


class TestAdjust:
    @pytest.mark.asyncio
    async def test_increment_creates_row(self, statistics_store: SQLiteStatisticsStore) -> None:
        result = await statistics_store.adjust(Sentiment.GOOD, 1)
        stats = await statistics_store.read()

        assert result.ok is True
        assert stats.total_count == 1
        assert stats.good_count == 1
        assert stats.bad_count == 0

    @pytest.mark.asyncio
    async def test_increment_then_decrement(self, statistics_store: SQLiteStatisticsStore) -> None:
        await statistics_store.adjust(Sentiment.BAD, 1)
        await statistics_store.adjust(Sentiment.NEUTRAL, 1)
        await statistics_store.adjust(Sentiment.BAD, -1)

        stats = await statistics_store.read()

        assert stats.total_count == 1
        assert stats.bad_count == 0
        assert stats.neutral_count == 1
        assert stats.count_for(Sentiment.NEUTRAL) == 1

    @pytest.mark.asyncio
    async def test_concurrent_increments_are_not_lost(
        self, statistics_store: SQLiteStatisticsStore
    ) -> None:
        await asyncio.gather(*(statistics_store.adjust(Sentiment.GOOD, 1) for _ in range(10)))

        stats = await statistics_store.read()

        assert stats.total_count == 10
        assert stats.good_count == 10

    @pytest.mark.asyncio
    @pytest.mark.parametrize("delta", [0, 2, -5])
    async def test_rejects_other_deltas(
        self, statistics_store: SQLiteStatisticsStore, delta: int
    ) -> None:
        with pytest.raises(ValueError, match="delta must be"):
            await statistics_store.adjust(Sentiment.GOOD, delta)

    @pytest.mark.asyncio
    async def test_adjust_without_table_returns_failure(self, tmp_path: Path) -> None:
        store = SQLiteStatisticsStore(db_path=tmp_path / "uninitialised.db")
        result = await store.adjust(Sentiment.GOOD, 1)
        assert result.ok is False
        assert "Failed to update statistics" in result.reason


def test_provider_name() -> None:
    assert SQLiteStatisticsStore().get_provider_name() == "sqlite_statistics"
