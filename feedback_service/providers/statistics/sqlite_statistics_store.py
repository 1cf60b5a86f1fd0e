"""SQLite-backed aggregate statistics store.

Holds the single ``global`` row of running sentiment counts.  Every
adjustment is one ``INSERT ... ON CONFLICT DO UPDATE`` statement that adds
the deltas in SQL, so concurrent writers never lose an update and nobody
reads the counters before writing them.
"""

from __future__ import annotations

from pathlib import Path

import aiosqlite
import structlog

from feedback_service.interfaces.statistics_store import IStatisticsStore
from feedback_service.models.feedback import (
    STATISTICS_ID,
    AggregateStatistics,
    Sentiment,
    utc_now_iso,
)
from feedback_service.models.result import SUCCESS, Failure, OperationResult
from feedback_service.utils.errors import StoreError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_DB_PATH = Path("data/statistics.db")

_CREATE_TABLE_SQL = """\
CREATE TABLE IF NOT EXISTS statistics (
    id             TEXT    PRIMARY KEY,
    total_count    INTEGER NOT NULL DEFAULT 0,
    good_count     INTEGER NOT NULL DEFAULT 0,
    bad_count      INTEGER NOT NULL DEFAULT 0,
    neutral_count  INTEGER NOT NULL DEFAULT 0,
    last_updated   TEXT    NOT NULL
);
"""

_ADJUST_SQL = """\
INSERT INTO statistics (id, total_count, good_count, bad_count, neutral_count, last_updated)
VALUES (?, ?, ?, ?, ?, ?)
ON CONFLICT(id)
DO UPDATE SET total_count   = total_count   + excluded.total_count,
              good_count    = good_count    + excluded.good_count,
              bad_count     = bad_count     + excluded.bad_count,
              neutral_count = neutral_count + excluded.neutral_count,
              last_updated  = excluded.last_updated;
"""

_SELECT_SQL = """\
SELECT id, total_count, good_count, bad_count, neutral_count, last_updated
FROM statistics
WHERE id = ?;
"""


class SQLiteStatisticsStore(IStatisticsStore):
    """SQLite-backed running totals."""

    def __init__(
        self,
        db_path: str | Path = _DEFAULT_DB_PATH,
        timeout_seconds: float = 5.0,
    ) -> None:
        self._db_path = Path(db_path)
        self._timeout = timeout_seconds

    def _connect(self) -> aiosqlite.Connection:
        return aiosqlite.connect(str(self._db_path), timeout=self._timeout)

    async def initialize(self) -> None:
        """Create the statistics table if it doesn't exist."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        async with self._connect() as db:
            await db.execute("PRAGMA journal_mode=WAL;")
            await db.execute(_CREATE_TABLE_SQL)
            await db.commit()
        logger.info("statistics_db_initialized", path=str(self._db_path))

    async def adjust(self, sentiment: Sentiment, delta: int) -> OperationResult:
        if delta not in (1, -1):
            msg = f"delta must be +1 or -1, got {delta}"
            raise ValueError(msg)

        params = (
            STATISTICS_ID,
            delta,
            delta if sentiment is Sentiment.GOOD else 0,
            delta if sentiment is Sentiment.BAD else 0,
            delta if sentiment is Sentiment.NEUTRAL else 0,
            utc_now_iso(),
        )
        try:
            async with self._connect() as db:
                await db.execute(_ADJUST_SQL, params)
                await db.commit()
        except aiosqlite.Error as exc:
            logger.error(
                "statistics_adjust_failed",
                sentiment=sentiment.value,
                delta=delta,
                error=str(exc),
            )
            return Failure(reason=f"Failed to update statistics: {exc}")
        return SUCCESS

    async def read(self) -> AggregateStatistics:
        try:
            async with self._connect() as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(_SELECT_SQL, (STATISTICS_ID,))
                row = await cursor.fetchone()
        except aiosqlite.Error as exc:
            logger.error("statistics_read_failed", error=str(exc))
            raise StoreError(
                message=f"Failed to get statistics: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        if row is None:
            return AggregateStatistics.zero()
        return AggregateStatistics(
            id=row["id"],
            total_count=row["total_count"],
            good_count=row["good_count"],
            bad_count=row["bad_count"],
            neutral_count=row["neutral_count"],
            last_updated=row["last_updated"],
        )

    def get_provider_name(self) -> str:
        return "sqlite_statistics"
