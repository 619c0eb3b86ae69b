"""Unit tests for logging setup."""

import logging
from unittest.mock import patch

from sso.config import Settings
from sso.util.logging import log_level, setup_logging


class TestLogLevel:
    """Tests for log_level function."""

    def test_debug_wins(self):
        assert log_level(Settings(debug=True, environment="test")) == logging.DEBUG

    def test_test_environment_is_quiet(self):
        assert log_level(Settings(debug=False, environment="test")) == logging.WARNING

    def test_production_logs_info(self):
        assert log_level(Settings(debug=False, environment="production")) == logging.INFO


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_httpx_never_logs_request_urls(self):
        # Leave pytest's own root handlers in place
        with patch("logging.basicConfig") as basic_config:
            setup_logging(Settings(debug=True, environment="development"))

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("sso").level == logging.DEBUG
