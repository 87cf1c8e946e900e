"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods delegate to structlog
- error() records exception type and message
- bind() returns a new adapter with context
- Sensitive keys are redacted by the processor
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging.console_adapter import (
    REDACTED,
    ConsoleAdapter,
    redact_sensitive,
)


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_logs_message_with_context(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("permissions_updated", target_id=2)

            mock_logger.info.assert_called_once_with("permissions_updated", target_id=2)

    def test_warning_logs_message_with_context(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter(use_json=True)
            adapter.warning("delegation_denied", code="self_modification")

            mock_logger.warning.assert_called_once_with(
                "delegation_denied", code="self_modification"
            )

    def test_error_includes_exception_details(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("store_failed", error=RuntimeError("boom"), user_id=1)

            mock_logger.error.assert_called_once_with(
                "store_failed",
                user_id=1,
                error_type="RuntimeError",
                error_message="boom",
            )

    def test_bind_returns_new_adapter(self):
        with patch("src.infrastructure.logging.console_adapter.structlog") as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(granter_id=1)
            bound.info("permissions_updated")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(granter_id=1)
            bound_logger.info.assert_called_once_with("permissions_updated")


@pytest.mark.unit
class TestRedaction:
    """Test the redact_sensitive processor."""

    def test_sensitive_values_are_masked(self):
        event = {
            "event": "login_failed",
            "password": "hunter2",
            "token": "eyJ...",
            "password_hash": "$2b$...",
            "user_id": 3,
        }

        result = redact_sensitive(None, "info", event)

        assert result["password"] == REDACTED
        assert result["token"] == REDACTED
        assert result["password_hash"] == REDACTED
        assert result["user_id"] == 3
