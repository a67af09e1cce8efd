"""Tests for logging setup."""

import logging
import sys

from quadforge.utils.logging import setup_logging


class TestSetupLogging:
    """Test root logger configuration."""

    def test_level_and_stream(self):
        """Test that logs go to stderr at the requested level."""
        setup_logging("debug")
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")

        assert logging.getLogger().level == logging.INFO
