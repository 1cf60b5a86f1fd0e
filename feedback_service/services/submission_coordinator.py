"""Feedback submission coordinator: the write path.

# ─── ARCHITECTURE ROLE ───────────────────────────────────────────────
#
# Layer: Services (business logic orchestration).
# Depends on: ISentimentClassifier, IFeedbackStore, IStatisticsStore.
#
# One submission is one stateless unit of work:
#
#   1. VALIDATE        body parses, text and sessionId present, length.
#                      Nothing external is called before this passes.
#   2. IDEMPOTENCY     SHA-256(sessionId + ":" + trimmed text); a stored
#                      record under that key is returned as-is (200).
#   3. CLASSIFY        failure aborts with no record and no counter change.
#   4. COUNT (+1)      dispatched as a task, concurrent with step 5.  Its
#                      outcome never decides the response.
#   5. PERSIST         the record write must succeed.  On failure the +1
#                      is reversed with a -1 (only if the +1 landed), then
#                      the request fails.
#
# The +1 and the -1 are separate, non-atomic writes.  If the -1 also
# fails, the aggregate counters drift from the true record count; the
# records are the source of truth and the counters are a derived view.
#
# The idempotency lookup and the record write are not atomic either: two
# concurrent first submissions with the same key can both be stored.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import asyncio
import json
from typing import Any
from uuid import uuid4

import structlog

from feedback_service.interfaces.feedback_store import IFeedbackStore
from feedback_service.interfaces.sentiment_classifier import ISentimentClassifier
from feedback_service.interfaces.statistics_store import IStatisticsStore
from feedback_service.models.feedback import (
    FeedbackRecord,
    Sentiment,
    SubmissionResult,
    utc_now_iso,
)
from feedback_service.models.result import Failure, OperationResult
from feedback_service.utils.errors import MalformedRequestError, StoreError, ValidationError
from feedback_service.utils.idempotency import compute_idempotency_key, normalize_text

logger = structlog.get_logger(logger_name=__name__)

DEFAULT_MAX_TEXT_LENGTH = 1000


def parse_submission(body: bytes | str | None) -> tuple[Any, Any]:
    """Parse a raw request body into ``(text, sessionId)``.

    Values are returned unvalidated; :meth:`SubmissionCoordinator.submit`
    checks them.

    Raises
    ------
    MalformedRequestError
        If the body is empty, is not JSON, or is not a JSON object.
    """
    if not body:
        raise MalformedRequestError()
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise MalformedRequestError() from exc
    if not isinstance(payload, dict):
        raise MalformedRequestError()
    return payload.get("text"), payload.get("sessionId")


class SubmissionCoordinator:
    """Accepts one feedback submission and decides every write it causes.

    All collaborators are constructor-injected; the coordinator keeps no
    state between calls.
    """

    def __init__(
        self,
        classifier: ISentimentClassifier,
        feedback_store: IFeedbackStore,
        statistics_store: IStatisticsStore,
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
    ) -> None:
        self._classifier = classifier
        self._feedback_store = feedback_store
        self._statistics_store = statistics_store
        self._max_text_length = max_text_length

    # ── Public API ─────────────────────────────────────────────────────

    async def submit(self, text: Any, session_id: Any) -> SubmissionResult:
        """Classify and store a feedback submission, or return its earlier result.

        Returns
        -------
        SubmissionResult
            ``created=True`` for a new record, ``False`` for a duplicate.

        Raises
        ------
        ValidationError
            If text/sessionId are missing or the text is too long.
        DependencyFailure
            If the idempotency lookup, classification or record write fails.
        """
        trimmed_text, session_id = self._validate(text, session_id)
        idempotency_key = compute_idempotency_key(session_id, trimmed_text)
        log = logger.bind(idempotency_key=idempotency_key[:16])

        existing = await self._feedback_store.find_by_idempotency_key(idempotency_key)
        if existing is not None:
            log.info("feedback_duplicate", feedback_id=existing.id)
            return SubmissionResult(feedback=existing.to_view(), created=False)

        classification = await self._classifier.classify(trimmed_text)

        record = FeedbackRecord(
            id=str(uuid4()),
            idempotency_key=idempotency_key,
            text=trimmed_text,
            sentiment=classification.sentiment,
            confidence=classification.confidence,
            timestamp=utc_now_iso(),
        )

        increment = asyncio.create_task(self._adjust_statistics(record.sentiment, 1))
        try:
            saved = await self._feedback_store.put(record)
        except Exception:
            await self._compensate(record.sentiment, increment)
            raise

        if not saved.ok:
            await self._compensate(record.sentiment, increment)
            raise StoreError(
                message=getattr(saved, "reason", "Failed to save feedback"),
                provider_name=self._feedback_store.get_provider_name(),
            )

        await increment
        log.info(
            "feedback_created",
            feedback_id=record.id,
            sentiment=record.sentiment.value,
            confidence=record.confidence,
        )
        return SubmissionResult(feedback=record.to_view(), created=True)

    # ── Private: Validation ────────────────────────────────────────────

    def _validate(self, text: Any, session_id: Any) -> tuple[str, str]:
        trimmed_text = normalize_text(text) if isinstance(text, str) else ""
        if not trimmed_text or not isinstance(session_id, str) or not session_id:
            raise ValidationError("Text and sessionId are required")
        if len(trimmed_text) > self._max_text_length:
            raise ValidationError(
                f"Text must be {self._max_text_length} characters or less"
            )
        return trimmed_text, session_id

    # ── Private: Statistics ────────────────────────────────────────────

    async def _adjust_statistics(self, sentiment: Sentiment, delta: int) -> OperationResult:
        """Adjust the counters; failures are logged and returned, never raised."""
        try:
            result = await self._statistics_store.adjust(sentiment, delta)
        except Exception as exc:
            result = Failure(reason=str(exc))
        if not result.ok:
            logger.warning(
                "statistics_update_failed",
                sentiment=sentiment.value,
                delta=delta,
                reason=getattr(result, "reason", ""),
            )
        return result

    async def _compensate(
        self,
        sentiment: Sentiment,
        increment: asyncio.Task[OperationResult],
    ) -> None:
        """Reverse the +1 after a failed record write, if the +1 was applied."""
        incremented = await increment
        if not incremented.ok:
            logger.info("statistics_compensation_skipped", sentiment=sentiment.value)
            return

        reversed_ = await self._adjust_statistics(sentiment, -1)
        if reversed_.ok:
            logger.info("statistics_compensated", sentiment=sentiment.value)
        else:
            logger.error("statistics_compensation_failed", sentiment=sentiment.value)
