"""Tests for structured logging setup."""
import logging

from tagblaze.core.logging import configure_logging


def test_configure_logging_is_idempotent():
    # The app import in conftest already configured logging once
    root = logging.getLogger()
    handlers_before = list(root.handlers)

    configure_logging()
    configure_logging()

    assert root.handlers == handlers_before
