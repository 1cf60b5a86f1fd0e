"""Application settings loaded from environment variables via pydantic-settings.

Two sources, in priority order:

  1. Environment variables, e.g. ``SENTIMENT_BACKEND=comprehend``
  2. A ``.env`` file in the working directory (local development)

Field names map to upper-cased environment variables automatically.
Defaults apply when neither source sets a value.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Feedback service settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Sentiment classification ===
    # "comprehend" (default) uses AWS Comprehend; "llm" picks the first
    # configured LLM provider (Anthropic -> OpenAI -> Ollama).
    sentiment_backend: str = "comprehend"
    aws_region: str = "us-east-1"
    classifier_timeout_seconds: float = 10.0

    # === LLM Providers ===
    # Empty string = "not configured"; main.py skips providers with empty keys.
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-3-5-haiku-latest"
    openai_api_key: str = ""
    openai_base_url: str = ""  # OpenAI-compatible endpoint (TogetherAI, Groq, ...)
    openai_text_model: str = ""
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1"

    # === Storage ===
    feedback_db_path: str = "data/feedback.db"
    statistics_db_path: str = "data/statistics.db"
    store_timeout_seconds: float = 5.0

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_env: str = "development"
    log_level: str = "INFO"
    cors_allowed_origins: list[str] = ["*"]
