"""Public interface definitions for every external collaborator.

The submission coordinator and the read side only ever talk to these
abstract base classes.  Concrete adapters live in
``feedback_service/providers/`` and are constructed once in
``feedback_service/main.py``, then injected, so tests can substitute
fakes without touching module state.

CONCRETE PROVIDER MAP:
    Interface                  →  Concrete implementations
    ─────────────────────────────────────────────────────────────────────
    ISentimentClassifier       →  ComprehendSentimentClassifier,
                                  LLMSentimentClassifier
    ILLMProvider               →  AnthropicLLMProvider, OpenAILLMProvider,
                                  OllamaLLMProvider
    IFeedbackStore             →  SQLiteFeedbackStore
    IStatisticsStore           →  SQLiteStatisticsStore
"""

from feedback_service.interfaces.feedback_store import IFeedbackStore
from feedback_service.interfaces.llm_provider import ILLMProvider
from feedback_service.interfaces.sentiment_classifier import ISentimentClassifier
from feedback_service.interfaces.statistics_store import IStatisticsStore

__all__ = [
    "IFeedbackStore",
    "ILLMProvider",
    "ISentimentClassifier",
    "IStatisticsStore",
]
