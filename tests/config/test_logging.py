"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator

import pytest
import structlog

from whencal.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    when = logging.getLogger("whencal")
    when_level = when.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    when.setLevel(when_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("whencal").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("whencal").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        structlog.get_logger("whencal.test").warning("json test", answer=42)
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "whencal.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=True, log_json=True, stream=stream)
        logging.getLogger("whencal.services.report").debug("Skipping line 3")
        parsed = json.loads(stream.getvalue().strip())
        assert parsed["event"] == "Skipping line 3"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "whencal.services.report"

    def test_debug_hidden_when_not_verbose(self) -> None:
        stream = io.StringIO()
        configure_logging(verbose=False, log_json=True, stream=stream)
        logging.getLogger("whencal.services.report").debug("hidden")
        assert stream.getvalue() == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
