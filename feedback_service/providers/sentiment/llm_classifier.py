"""LLM-backed sentiment classifier.

Prompts any :class:`ILLMProvider` for a JSON verdict in the Comprehend
vocabulary, then maps it onto the service's three buckets.  Useful when
no managed sentiment API is available (local development with Ollama,
or an Anthropic/OpenAI key only).
"""

from __future__ import annotations

import json
from typing import Any

import structlog

from feedback_service.interfaces.llm_provider import ILLMProvider
from feedback_service.interfaces.sentiment_classifier import ISentimentClassifier
from feedback_service.models.feedback import SentimentResult
from feedback_service.providers.sentiment.labels import clamp_confidence, to_bucket
from feedback_service.utils.errors import ClassificationError, LLMError

logger = structlog.get_logger(logger_name=__name__)

_SYSTEM_PROMPT = "You are a sentiment classifier. Respond only with valid JSON."

_USER_PROMPT_TEMPLATE = (
    "Classify the overall sentiment of the customer feedback below.\n\n"
    "Respond with ONLY this JSON structure:\n"
    '{{"sentiment": "POSITIVE" | "NEGATIVE" | "NEUTRAL" | "MIXED", '
    '"confidence": <number between 0 and 1>}}\n\n'
    "Feedback:\n{text}"
)


class LLMSentimentClassifier(ISentimentClassifier):
    """Sentiment classifier that delegates to an LLM provider.

    Parameters
    ----------
    llm:
        The LLM backend to prompt.
    temperature:
        Sampling temperature; 0 keeps labels stable for identical text.
    max_tokens:
        Response budget; the expected JSON is a few dozen tokens.
    """

    def __init__(
        self,
        llm: ILLMProvider,
        temperature: float = 0.0,
        max_tokens: int = 100,
    ) -> None:
        self._llm = llm
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def classify(self, text: str) -> SentimentResult:
        try:
            response = await self._llm.complete(
                system_prompt=_SYSTEM_PROMPT,
                user_prompt=_USER_PROMPT_TEMPLATE.format(text=text),
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except LLMError as exc:
            raise ClassificationError(
                message=f"LLM sentiment call failed: {exc.message}",
                provider_name=self.get_provider_name(),
            ) from exc

        parsed = self._parse_json_response(response)
        if parsed is None or "sentiment" not in parsed:
            logger.warning("llm_sentiment_unparseable", response=response[:200])
            raise ClassificationError(
                message="LLM returned an unparseable sentiment response",
                provider_name=self.get_provider_name(),
            )

        return SentimentResult(
            sentiment=to_bucket(str(parsed.get("sentiment"))),
            confidence=clamp_confidence(parsed.get("confidence")),
        )

    def get_provider_name(self) -> str:
        return f"llm:{self._llm.get_provider_name()}"

    @staticmethod
    def _parse_json_response(response: str) -> dict[str, Any] | None:
        """Parse a JSON object from an LLM response, handling markdown code fences."""
        text = response.strip()
        if text.startswith("```"):
            lines = [line for line in text.split("\n") if not line.strip().startswith("```")]
            text = "\n".join(lines)

        try:
            parsed = json.loads(text)
        except json.JSONDecodeError:
            # Fall back to the outermost {...} span.
            start = text.find("{")
            end = text.rfind("}") + 1
            if start < 0 or end <= start:
                return None
            try:
                parsed = json.loads(text[start:end])
            except json.JSONDecodeError:
                return None
        return parsed if isinstance(parsed, dict) else None
