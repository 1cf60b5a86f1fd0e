"""Structured logging setup using structlog.

One shared processor chain feeds either a coloured ConsoleRenderer for
local development or a JSONRenderer for production.  Every event carries
the service name and version so lines from several deployments can be
told apart in one log stream.

Standard-library ``logging`` is routed through the same formatter so that
uvicorn, botocore and the LLM SDKs log in the same shape.  Those client
libraries are chatty at INFO (one line per HTTP request or credential
lookup), so they are held at WARNING unless the service itself runs at
DEBUG.
"""

import logging
import os
import sys

import structlog

# Third-party loggers that emit per-request noise at INFO.
NOISY_LOGGERS: tuple[str, ...] = (
    "botocore",
    "boto3",
    "urllib3",
    "httpx",
    "httpcore",
    "anthropic",
    "openai",
    "aiosqlite",
)


def _service_context(service_name: str, service_version: str) -> structlog.types.Processor:
    """Return a processor that stamps ``service`` and ``version`` on every event."""

    def add_service(_logger, _method_name, event_dict):  # noqa: ANN001, ANN202
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("version", service_version)
        return event_dict

    return add_service


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    service_name: str = "feedback-service",
    service_version: str = "0.1.0",
) -> structlog.BoundLogger:
    """Configure structlog with environment-appropriate rendering.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
        json_output: Force JSON output. When False, uses console rendering in
                     development and JSON in production (detected via APP_ENV).
        service_name: Value of the ``service`` key on every event.
        service_version: Value of the ``version`` key on every event.

    Returns:
        A configured structlog BoundLogger.
    """
    app_env = os.environ.get("APP_ENV", "development")
    use_json = json_output or app_env == "production"
    level = log_level.upper()

    # contextvars first so request-scoped bindings are merged before rendering.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _service_context(service_name, service_version),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *shared_processors,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    library_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a named structlog logger, configuring defaults on first use."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
