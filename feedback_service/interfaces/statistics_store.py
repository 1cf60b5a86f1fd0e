"""Abstract base class for the aggregate sentiment counter."""

from __future__ import annotations

from abc import ABC, abstractmethod

from feedback_service.models.feedback import AggregateStatistics, Sentiment
from feedback_service.models.result import OperationResult


class IStatisticsStore(ABC):
    """Contract for the single "global" statistics record.

    ``adjust`` must be atomic in the backing store: several coordinators
    call it concurrently and none of them reads the counters first.
    """

    @abstractmethod
    async def adjust(self, sentiment: Sentiment, delta: int) -> OperationResult:
        """Add *delta* to ``totalCount`` and the *sentiment* bucket.

        Also stamps ``lastUpdated``.  Creates the record if it is missing.

        Parameters
        ----------
        sentiment:
            The bucket to adjust alongside the total.
        delta:
            ``+1`` for a newly classified submission, ``-1`` to reverse one.

        Returns
        -------
        OperationResult
            ``Success`` or ``Failure``; storage errors are never raised.
        """

    @abstractmethod
    async def read(self) -> AggregateStatistics:
        """Return the current statistics, or all-zero defaults if none exist.

        Raises
        ------
        feedback_service.utils.errors.StoreError
            If the store cannot be read.
        """

    @abstractmethod
    async def initialize(self) -> None:
        """Create tables if they don't exist.  Called at startup."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this store."""
