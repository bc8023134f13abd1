"""Tests for logging setup."""

import logging

import pytest
import structlog
from tfexporter.logging import bind_context, configure_logging


@pytest.fixture
def restore_structlog():
    saved = structlog.get_config()
    yield
    structlog.configure(**saved)
    structlog.contextvars.clear_contextvars()


class TestConfigureLogging:
    def test_accepts_level_name(self, restore_structlog):
        configure_logging("debug")

        assert structlog.is_configured()

    def test_unknown_level_falls_back(self, restore_structlog):
        configure_logging("chatty")

        assert structlog.is_configured()

    def test_accepts_int(self, restore_structlog):
        configure_logging(logging.WARNING)

        assert structlog.is_configured()


class TestBindContext:
    def test_binds_logger_fields(self, restore_structlog):
        log = bind_context(run_id="4242")

        assert structlog.get_context(log)["run_id"] == "4242"

    def test_no_process_wide_context(self, restore_structlog):
        """A second run does not inherit the previous run id."""
        structlog.contextvars.clear_contextvars()
        bind_context(run_id="4242")

        assert "run_id" not in structlog.contextvars.get_contextvars()
