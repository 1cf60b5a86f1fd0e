"""AWS Comprehend sentiment classifier.

Calls ``DetectSentiment`` (language ``en``) through a boto3 client.  boto3
is synchronous, so each call runs in a worker thread to keep the event
loop free.  Timeouts come from the botocore client config; retries are
disabled because a failed classification is a failed submission.
"""

from __future__ import annotations

import asyncio
from typing import Any

import boto3
import structlog
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from feedback_service.interfaces.sentiment_classifier import ISentimentClassifier
from feedback_service.models.feedback import SentimentResult
from feedback_service.providers.sentiment.labels import SCORE_KEYS, clamp_confidence, to_bucket
from feedback_service.utils.errors import ClassificationError

logger = structlog.get_logger(logger_name=__name__)


class ComprehendSentimentClassifier(ISentimentClassifier):
    """Sentiment classifier backed by AWS Comprehend.

    Parameters
    ----------
    region:
        AWS region hosting Comprehend.
    timeout_seconds:
        Connect and read timeout for the underlying HTTP client.
    client:
        Pre-built boto3 Comprehend client; created from *region* when omitted.
    """

    def __init__(
        self,
        region: str = "us-east-1",
        timeout_seconds: float = 10.0,
        client: Any | None = None,
    ) -> None:
        self._region = region
        if client is None:
            client = boto3.client(
                "comprehend",
                region_name=region,
                config=Config(
                    connect_timeout=timeout_seconds,
                    read_timeout=timeout_seconds,
                    retries={"max_attempts": 1},
                ),
            )
        self._client = client

    async def classify(self, text: str) -> SentimentResult:
        try:
            response = await asyncio.to_thread(
                self._client.detect_sentiment, Text=text, LanguageCode="en"
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("comprehend_detect_sentiment_failed", error=str(exc))
            raise ClassificationError(
                message=f"Comprehend DetectSentiment failed: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        raw_label = (response.get("Sentiment") or "").upper()
        scores = response.get("SentimentScore") or {}
        confidence = clamp_confidence(scores.get(SCORE_KEYS.get(raw_label, ""), 0.0))

        result = SentimentResult(sentiment=to_bucket(raw_label), confidence=confidence)
        logger.debug(
            "comprehend_sentiment",
            raw=raw_label,
            sentiment=result.sentiment.value,
            confidence=result.confidence,
        )
        return result

    def get_provider_name(self) -> str:
        return "comprehend"
