"""Abstract base class for feedback record persistence.

Records are keyed by ``id`` with a secondary lookup by idempotency key.
The secondary lookup followed by a write is not atomic: two concurrent
first-time submissions with the same key can both miss the lookup and
both be stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from feedback_service.models.feedback import FeedbackRecord, Sentiment
from feedback_service.models.result import OperationResult


class IFeedbackStore(ABC):
    """Contract for feedback record stores.

    All operations are async to support network-backed stores.
    """

    @abstractmethod
    async def find_by_idempotency_key(self, idempotency_key: str) -> FeedbackRecord | None:
        """Return the record stored under *idempotency_key*, or ``None``.

        Raises
        ------
        feedback_service.utils.errors.StoreError
            If the store cannot be queried.
        """

    @abstractmethod
    async def put(self, record: FeedbackRecord) -> OperationResult:
        """Persist *record*.

        Returns
        -------
        OperationResult
            ``Success`` once the record is durable, ``Failure`` otherwise.
            Implementations do not raise for storage errors.
        """

    @abstractmethod
    async def scan_all(self) -> list[FeedbackRecord]:
        """Return every stored record, newest first.

        Raises
        ------
        feedback_service.utils.errors.StoreError
            If the store cannot be read.
        """

    @abstractmethod
    async def scan_by_sentiment(self, sentiment: Sentiment) -> list[FeedbackRecord]:
        """Return records labelled *sentiment*, newest first.

        Raises
        ------
        feedback_service.utils.errors.StoreError
            If the store cannot be read.
        """

    @abstractmethod
    async def initialize(self) -> None:
        """Create tables/indices if they don't exist.  Called at startup."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this store."""
