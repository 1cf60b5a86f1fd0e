"""Abstract base class for sentiment classifiers.

The submission coordinator treats classification as a black box: text in,
``SentimentResult`` out.  Implementations may call a managed NLP service
(AWS Comprehend) or prompt an LLM.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from feedback_service.models.feedback import SentimentResult


# Concrete implementations: ComprehendSentimentClassifier, LLMSentimentClassifier
# Located in: feedback_service/providers/sentiment/
class ISentimentClassifier(ABC):
    """Contract for sentiment classification services."""

    @abstractmethod
    async def classify(self, text: str) -> SentimentResult:
        """Classify *text* into Good / Bad / Neutral with a confidence.

        Parameters
        ----------
        text:
            Already-trimmed feedback text, at most 1000 characters.

        Returns
        -------
        SentimentResult
            The sentiment bucket and a confidence in ``[0, 1]``.

        Raises
        ------
        feedback_service.utils.errors.ClassificationError
            If the backing service fails or its answer cannot be mapped.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this classifier."""
