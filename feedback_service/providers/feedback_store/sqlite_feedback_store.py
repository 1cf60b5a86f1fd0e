"""SQLite-backed feedback record store.

Persists feedback records to ``data/feedback.db`` using ``aiosqlite`` for
async I/O.  Each operation opens its own connection; the connection
``timeout`` is the busy timeout, so a locked database fails the call
instead of blocking the request forever.

The idempotency-key index is intentionally not UNIQUE: the coordinator
does lookup-then-write, and the store only guarantees that lookups are
served from an index.
"""

from __future__ import annotations

from pathlib import Path

import aiosqlite
import structlog

from feedback_service.interfaces.feedback_store import IFeedbackStore
from feedback_service.models.feedback import FeedbackRecord, Sentiment
from feedback_service.models.result import SUCCESS, Failure, OperationResult
from feedback_service.utils.errors import StoreError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_DB_PATH = Path("data/feedback.db")

_CREATE_TABLE_SQL = """\
CREATE TABLE IF NOT EXISTS feedback (
    id               TEXT PRIMARY KEY,
    idempotency_key  TEXT NOT NULL,
    text             TEXT NOT NULL,
    sentiment        TEXT NOT NULL,
    confidence       REAL NOT NULL,
    timestamp        TEXT NOT NULL
);
"""

_CREATE_INDICES_SQL = [
    "CREATE INDEX IF NOT EXISTS idx_feedback_idempotency ON feedback(idempotency_key);",
    "CREATE INDEX IF NOT EXISTS idx_feedback_sentiment ON feedback(sentiment);",
]

_COLUMNS = "id, idempotency_key, text, sentiment, confidence, timestamp"

_INSERT_SQL = f"INSERT INTO feedback ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?);"

_SELECT_BY_KEY_SQL = f"SELECT {_COLUMNS} FROM feedback WHERE idempotency_key = ? LIMIT 1;"

_SELECT_ALL_SQL = f"SELECT {_COLUMNS} FROM feedback ORDER BY timestamp DESC;"

_SELECT_BY_SENTIMENT_SQL = (
    f"SELECT {_COLUMNS} FROM feedback WHERE sentiment = ? ORDER BY timestamp DESC;"
)


def _row_to_record(row: aiosqlite.Row) -> FeedbackRecord:
    return FeedbackRecord(
        id=row["id"],
        idempotency_key=row["idempotency_key"],
        text=row["text"],
        sentiment=Sentiment(row["sentiment"]),
        confidence=row["confidence"],
        timestamp=row["timestamp"],
    )


class SQLiteFeedbackStore(IFeedbackStore):
    """SQLite-backed feedback persistence."""

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
        """Create the feedback table and indices if they don't exist."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        async with self._connect() as db:
            await db.execute("PRAGMA journal_mode=WAL;")
            await db.execute(_CREATE_TABLE_SQL)
            for idx_sql in _CREATE_INDICES_SQL:
                await db.execute(idx_sql)
            await db.commit()
        logger.info("feedback_db_initialized", path=str(self._db_path))

    async def find_by_idempotency_key(self, idempotency_key: str) -> FeedbackRecord | None:
        try:
            async with self._connect() as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(_SELECT_BY_KEY_SQL, (idempotency_key,))
                row = await cursor.fetchone()
        except aiosqlite.Error as exc:
            logger.error("idempotency_lookup_failed", error=str(exc))
            raise StoreError(
                message=f"Failed to check idempotency: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        return _row_to_record(row) if row is not None else None

    async def put(self, record: FeedbackRecord) -> OperationResult:
        try:
            async with self._connect() as db:
                await db.execute(
                    _INSERT_SQL,
                    (
                        record.id,
                        record.idempotency_key,
                        record.text,
                        record.sentiment.value,
                        record.confidence,
                        record.timestamp,
                    ),
                )
                await db.commit()
        except aiosqlite.Error as exc:
            logger.error("feedback_save_failed", feedback_id=record.id, error=str(exc))
            return Failure(reason=f"Failed to save feedback: {exc}")
        return SUCCESS

    async def scan_all(self) -> list[FeedbackRecord]:
        return await self._select(_SELECT_ALL_SQL, ())

    async def scan_by_sentiment(self, sentiment: Sentiment) -> list[FeedbackRecord]:
        return await self._select(_SELECT_BY_SENTIMENT_SQL, (sentiment.value,))

    async def _select(self, sql: str, params: tuple) -> list[FeedbackRecord]:
        try:
            async with self._connect() as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(sql, params)
                rows = await cursor.fetchall()
        except aiosqlite.Error as exc:
            logger.error("feedback_scan_failed", error=str(exc))
            raise StoreError(
                message=f"Failed to get feedback: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        return [_row_to_record(r) for r in rows]

    def get_provider_name(self) -> str:
        return "sqlite_feedback"
