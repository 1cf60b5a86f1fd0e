"""LLM provider adapters.

Three concrete implementations of ILLMProvider:
    - AnthropicLLMProvider - Claude via the Messages API
    - OpenAILLMProvider    - gpt-4o-mini (also any OpenAI-compatible API)
    - OllamaLLMProvider    - local models via an Ollama server

main.py picks the first one with credentials configured and hands it to
LLMSentimentClassifier.
"""

from feedback_service.providers.llm.anthropic_provider import AnthropicLLMProvider
from feedback_service.providers.llm.ollama_provider import OllamaLLMProvider
from feedback_service.providers.llm.openai_provider import OpenAILLMProvider

__all__ = ["AnthropicLLMProvider", "OllamaLLMProvider", "OpenAILLMProvider"]
