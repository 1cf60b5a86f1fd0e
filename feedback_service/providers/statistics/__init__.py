"""Aggregate statistics stores.

SQLiteStatisticsStore keeps the single "global" counter row in
data/statistics.db and adjusts it with one atomic upsert per call.
"""

from feedback_service.providers.statistics.sqlite_statistics_store import SQLiteStatisticsStore

__all__ = ["SQLiteStatisticsStore"]
