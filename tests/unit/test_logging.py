"""Unit tests for the structlog configuration."""

from __future__ import annotations

import logging

import structlog

from feedback_service.utils.logging import NOISY_LOGGERS, configure_logging, get_logger


class TestConfigureLogging:
    def test_events_carry_service_and_version(self) -> None:
        configure_logging(service_name="feedback-service", service_version="9.9.9")

        add_service = structlog.get_config()["processors"][1]
        event = add_service(None, "info", {"event": "feedback_created"})

        assert event["service"] == "feedback-service"
        assert event["version"] == "9.9.9"
        assert get_logger("test") is not None

    def test_client_libraries_held_at_warning(self) -> None:
        configure_logging(log_level="INFO")

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        assert logging.getLogger().level == logging.INFO

    def test_debug_releases_client_libraries(self) -> None:
        configure_logging(log_level="debug")

        assert logging.getLogger("botocore").level == logging.DEBUG
        configure_logging(log_level="INFO")

    def test_explicit_event_keys_win(self) -> None:
        configure_logging(service_name="feedback-service")

        add_service = structlog.get_config()["processors"][1]
        event = add_service(None, "info", {"event": "x", "service": "override"})
        assert event["service"] == "override"
