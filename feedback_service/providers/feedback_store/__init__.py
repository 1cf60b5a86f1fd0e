"""Feedback record stores.

SQLiteFeedbackStore keeps records in data/feedback.db with a secondary
index on the idempotency key and one on the sentiment label.
"""

from feedback_service.providers.feedback_store.sqlite_feedback_store import SQLiteFeedbackStore

__all__ = ["SQLiteFeedbackStore"]
