"""Unit tests for the LLM provider adapters."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import openai
import pytest

from feedback_service.config.settings import Settings
from feedback_service.providers.llm.anthropic_provider import AnthropicLLMProvider
from feedback_service.providers.llm.ollama_provider import OllamaLLMProvider
from feedback_service.providers.llm.openai_provider import OpenAILLMProvider
from feedback_service.utils.errors import LLMError

_REQUEST = httpx.Request("POST", "https://api.example.com/v1/chat/completions")


def _settings(**overrides) -> Settings:
    defaults = {
        "anthropic_api_key": "",
        "openai_api_key": "",
        "openai_base_url": "",
        "openai_text_model": "",
        "ollama_base_url": "http://localhost:11434",
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


def _chat_response(content: str | None) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    response.usage.total_tokens = 42
    return response


# ======================================================================
# AnthropicLLMProvider
# ======================================================================


class TestAnthropicLLMProvider:
    def _provider(self, mock_client: MagicMock) -> AnthropicLLMProvider:
        with patch(
            "feedback_service.providers.llm.anthropic_provider.anthropic.AsyncAnthropic",
            return_value=mock_client,
        ):
            return AnthropicLLMProvider(settings=_settings(anthropic_api_key="sk-ant-test"))

    @pytest.mark.asyncio
    async def test_complete_joins_text_blocks(self) -> None:
        block = MagicMock()
        block.type = "text"
        block.text = '{"sentiment": "POSITIVE"}'
        response = MagicMock()
        response.content = [block]
        response.usage.input_tokens = 30
        response.usage.output_tokens = 8

        mock_client = MagicMock()
        mock_client.messages.create = AsyncMock(return_value=response)
        provider = self._provider(mock_client)

        result = await provider.complete("system", "user", temperature=0.0, max_tokens=100)

        assert result == '{"sentiment": "POSITIVE"}'
        kwargs = mock_client.messages.create.await_args.kwargs
        assert kwargs["system"] == "system"
        assert kwargs["messages"] == [{"role": "user", "content": "user"}]
        assert kwargs["max_tokens"] == 100

    @pytest.mark.asyncio
    async def test_no_text_blocks_raises(self) -> None:
        response = MagicMock()
        response.content = []
        mock_client = MagicMock()
        mock_client.messages.create = AsyncMock(return_value=response)

        with pytest.raises(LLMError, match="no text content"):
            await self._provider(mock_client).complete("s", "u")

    @pytest.mark.asyncio
    async def test_api_error_wrapped(self) -> None:
        mock_client = MagicMock()
        mock_client.messages.create = AsyncMock(
            side_effect=anthropic.APIConnectionError(request=_REQUEST)
        )

        with pytest.raises(LLMError, match="Anthropic API error"):
            await self._provider(mock_client).complete("s", "u")

    def test_availability_and_name(self) -> None:
        provider = self._provider(MagicMock())
        assert provider.is_available() is True
        assert provider.get_provider_name() == "anthropic"


# ======================================================================
# OpenAILLMProvider
# ======================================================================


class TestOpenAILLMProvider:
    def _provider(self, mock_client: MagicMock, **overrides) -> OpenAILLMProvider:
        with patch(
            "feedback_service.providers.llm.openai_provider.openai.AsyncOpenAI",
            return_value=mock_client,
        ):
            return OpenAILLMProvider(settings=_settings(openai_api_key="sk-test", **overrides))

    @pytest.mark.asyncio
    async def test_complete_uses_default_model(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(return_value=_chat_response("hello"))

        result = await self._provider(mock_client).complete("system", "user")

        assert result == "hello"
        kwargs = mock_client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}

    @pytest.mark.asyncio
    async def test_empty_content_raises(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(return_value=_chat_response(None))

        with pytest.raises(LLMError, match="empty response"):
            await self._provider(mock_client).complete("s", "u")

    @pytest.mark.asyncio
    async def test_timeout_wrapped(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=openai.APITimeoutError(request=_REQUEST)
        )

        with pytest.raises(LLMError, match="timed out"):
            await self._provider(mock_client).complete("s", "u")

    @pytest.mark.asyncio
    async def test_api_error_wrapped(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            side_effect=openai.APIConnectionError(request=_REQUEST)
        )

        with pytest.raises(LLMError, match="API error"):
            await self._provider(mock_client).complete("s", "u")

    def test_compatible_endpoint_label(self) -> None:
        provider = self._provider(
            MagicMock(),
            openai_base_url="https://api.together.xyz/v1",
            openai_text_model="meta-llama/Llama-3-8b-chat-hf",
        )
        assert provider.get_provider_name() == "openai-compatible"

    def test_plain_openai_label(self) -> None:
        assert self._provider(MagicMock()).get_provider_name() == "openai"


# ======================================================================
# OllamaLLMProvider
# ======================================================================


class TestOllamaLLMProvider:
    def test_client_points_at_v1_endpoint(self) -> None:
        with patch(
            "feedback_service.providers.llm.ollama_provider.openai.AsyncOpenAI"
        ) as mock_cls:
            OllamaLLMProvider(settings=_settings(ollama_base_url="http://gpu-box:11434/"))

        assert mock_cls.call_args.kwargs["base_url"] == "http://gpu-box:11434/v1"

    @pytest.mark.asyncio
    async def test_complete(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(return_value=_chat_response("ok"))
        with patch(
            "feedback_service.providers.llm.ollama_provider.openai.AsyncOpenAI",
            return_value=mock_client,
        ):
            provider = OllamaLLMProvider(settings=_settings())

        assert await provider.complete("s", "u") == "ok"
        assert mock_client.chat.completions.create.await_args.kwargs["model"] == "llama3.1"
        assert provider.get_provider_name() == "ollama"
        assert provider.is_available() is True
