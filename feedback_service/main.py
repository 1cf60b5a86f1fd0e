"""Feedback service FastAPI application entry point.

Wires together the classifier, stores and services via dependency
injection.  Loads configuration from ``.env`` and ``config/config.yaml``
and configures structured logging.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import structlog
import uvicorn
from fastapi import FastAPI

from feedback_service.api.middleware import install_middleware
from feedback_service.api.routes import router as api_router
from feedback_service.config.loader import load_config
from feedback_service.config.settings import Settings
from feedback_service.interfaces.llm_provider import ILLMProvider
from feedback_service.interfaces.sentiment_classifier import ISentimentClassifier
from feedback_service.providers.feedback_store.sqlite_feedback_store import SQLiteFeedbackStore
from feedback_service.providers.llm.anthropic_provider import AnthropicLLMProvider
from feedback_service.providers.llm.ollama_provider import OllamaLLMProvider
from feedback_service.providers.llm.openai_provider import OpenAILLMProvider
from feedback_service.providers.sentiment.comprehend_classifier import ComprehendSentimentClassifier
from feedback_service.providers.sentiment.llm_classifier import LLMSentimentClassifier
from feedback_service.providers.statistics.sqlite_statistics_store import SQLiteStatisticsStore
from feedback_service.services.feedback_query_service import FeedbackQueryService
from feedback_service.services.submission_coordinator import (
    DEFAULT_MAX_TEXT_LENGTH,
    SubmissionCoordinator,
)
from feedback_service.utils.errors import ConfigurationError
from feedback_service.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()
config = load_config(settings=settings)

APP_NAME = str(config.get("app", {}).get("name", "feedback-service"))
APP_VERSION = str(config.get("app", {}).get("version", "0.1.0"))

configure_logging(
    log_level=config["logging"]["level"],
    json_output=(config["app"]["env"] == "production"),
    service_name=APP_NAME,
    service_version=APP_VERSION,
)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Provider selection
# ---------------------------------------------------------------------------


def _build_llm_provider(app_settings: Settings) -> ILLMProvider:
    """Select the first available LLM provider.

    Priority order: Anthropic -> OpenAI -> Ollama.  Each candidate decides
    its own availability from the settings it was built with.

    Raises
    ------
    ConfigurationError
        If no provider has credentials or a base URL configured.
    """
    candidates: list[type[ILLMProvider]] = [
        AnthropicLLMProvider,
        OpenAILLMProvider,
        OllamaLLMProvider,
    ]
    for provider_cls in candidates:
        provider = provider_cls(settings=app_settings)
        if provider.is_available():
            return provider

    raise ConfigurationError(
        "No LLM provider configured: set ANTHROPIC_API_KEY, OPENAI_API_KEY "
        "or OLLAMA_BASE_URL, or use SENTIMENT_BACKEND=comprehend"
    )


def _build_classifier(app_settings: Settings, app_config: dict[str, Any]) -> ISentimentClassifier:
    """Build the sentiment classifier named by ``SENTIMENT_BACKEND``."""
    if app_settings.sentiment_backend.lower() == "comprehend":
        return ComprehendSentimentClassifier(
            region=app_settings.aws_region,
            timeout_seconds=app_settings.classifier_timeout_seconds,
        )

    llm_config = app_config.get("sentiment", {}).get("llm", {})
    return LLMSentimentClassifier(
        llm=_build_llm_provider(app_settings),
        temperature=llm_config.get("temperature", 0.0),
        max_tokens=llm_config.get("max_tokens", 100),
    )


# ---------------------------------------------------------------------------
# Full DI assembly for the FastAPI application
# ---------------------------------------------------------------------------


def _build_all(app_settings: Settings, app_config: dict[str, Any]) -> dict[str, Any]:
    """Construct every provider and service instance for the application.

    Returns a flat dict of named components to be stored on ``app.state``.
    """
    classifier = _build_classifier(app_settings, app_config)
    feedback_store = SQLiteFeedbackStore(
        db_path=app_settings.feedback_db_path,
        timeout_seconds=app_settings.store_timeout_seconds,
    )
    statistics_store = SQLiteStatisticsStore(
        db_path=app_settings.statistics_db_path,
        timeout_seconds=app_settings.store_timeout_seconds,
    )

    max_text_length = app_config.get("submission", {}).get(
        "max_text_length", DEFAULT_MAX_TEXT_LENGTH
    )
    coordinator = SubmissionCoordinator(
        classifier=classifier,
        feedback_store=feedback_store,
        statistics_store=statistics_store,
        max_text_length=max_text_length,
    )
    query_service = FeedbackQueryService(
        feedback_store=feedback_store,
        statistics_store=statistics_store,
    )

    provider_registry: dict[str, str] = {
        "classifier": classifier.get_provider_name(),
        "feedback_store": feedback_store.get_provider_name(),
        "statistics_store": statistics_store.get_provider_name(),
    }

    return {
        "classifier": classifier,
        "feedback_store": feedback_store,
        "statistics_store": statistics_store,
        "coordinator": coordinator,
        "query_service": query_service,
        "provider_registry": provider_registry,
    }


# ---------------------------------------------------------------------------
# Application lifespan (startup / shutdown)
# ---------------------------------------------------------------------------


@asynccontextmanager
async def _lifespan(application: FastAPI):  # noqa: ANN201
    """Initialise providers and services on startup."""
    components = _build_all(settings, config)

    for key, value in components.items():
        setattr(application.state, key, value)

    await components["feedback_store"].initialize()
    await components["statistics_store"].initialize()

    _logger.info(
        "app_startup",
        version=APP_VERSION,
        environment=config["app"]["env"],
        **components["provider_registry"],
    )

    yield

    _logger.info("app_shutdown")


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(*, use_lifespan: bool = True) -> FastAPI:
    """Build and configure the FastAPI application.

    Tests pass ``use_lifespan=False`` and populate ``app.state`` with fakes.
    """
    application = FastAPI(
        title="Feedback Sentiment API",
        version=APP_VERSION,
        description=(
            "Collect free-text feedback, classify its sentiment, and expose "
            "the records and running sentiment totals to an admin dashboard."
        ),
        lifespan=_lifespan if use_lifespan else None,
    )
    application.state.version = APP_VERSION

    install_middleware(application, allowed_origins=settings.cors_allowed_origins)
    application.include_router(api_router)

    return application


app = create_app()

# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def run() -> None:
    """Run the API with uvicorn using the configured host and port."""
    uvicorn.run(
        "feedback_service.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )


if __name__ == "__main__":
    run()
