"""Sentiment classifier adapters.

ComprehendSentimentClassifier calls AWS Comprehend; LLMSentimentClassifier
prompts whichever LLM provider main.py selected.  Both map the four raw
labels onto Good / Bad / Neutral.
"""

from feedback_service.providers.sentiment.comprehend_classifier import ComprehendSentimentClassifier
from feedback_service.providers.sentiment.llm_classifier import LLMSentimentClassifier

__all__ = ["ComprehendSentimentClassifier", "LLMSentimentClassifier"]
