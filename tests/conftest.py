"""Root test configuration."""

import json
import logging

import pytest
import structlog


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def write_plan(tmp_path):
    """Write a plan JSON document and return its path."""

    def _write(resource_changes, timestamp=None, name="plan.json"):
        data = {"format_version": "1.2", "resource_changes": resource_changes}
        if timestamp is not None:
            data["timestamp"] = timestamp
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def write_log(tmp_path):
    """Write a transcript and return its path."""

    def _write(text, name="run.log"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
