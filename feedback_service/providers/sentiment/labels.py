"""Mapping from raw four-way sentiment labels to the three service buckets.

Both classifiers speak the Comprehend vocabulary (POSITIVE, NEGATIVE,
NEUTRAL, MIXED).  MIXED and anything unrecognised fall into Neutral.
"""

from __future__ import annotations

import math

from feedback_service.models.feedback import Sentiment

_RAW_TO_BUCKET: dict[str, Sentiment] = {
    "POSITIVE": Sentiment.GOOD,
    "NEGATIVE": Sentiment.BAD,
    "NEUTRAL": Sentiment.NEUTRAL,
    "MIXED": Sentiment.NEUTRAL,
}

# Comprehend's SentimentScore keys, by raw label.
SCORE_KEYS: dict[str, str] = {
    "POSITIVE": "Positive",
    "NEGATIVE": "Negative",
    "NEUTRAL": "Neutral",
    "MIXED": "Mixed",
}


def to_bucket(raw_label: str | None) -> Sentiment:
    """Map a raw label (case-insensitive) to a sentiment bucket."""
    if not raw_label:
        return Sentiment.NEUTRAL
    return _RAW_TO_BUCKET.get(raw_label.strip().upper(), Sentiment.NEUTRAL)


def clamp_confidence(value: object) -> float:
    """Coerce *value* to a float in ``[0, 1]``; unusable values become 0."""
    try:
        confidence = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(confidence):
        return 0.0
    return min(max(confidence, 0.0), 1.0)
