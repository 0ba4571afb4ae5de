"""Tests for structured logging utilities."""

import json
import logging

import pytest

from ggsa_export.config.logging_config import LoggingConfig, configure_logging, reset_logging
from ggsa_export.utils.logging_utils import LogContext, get_log_context, log_function_call


class TestLogContext:
    """Test LogContext context manager."""

    def teardown_method(self):
        """Reset logging after each test."""
        reset_logging()

    def test_context_outside_block_is_empty(self):
        assert get_log_context() == {}

    def test_nested_contexts(self):
        """Test that inner fields add to and override outer fields."""
        with LogContext(export_id="ggsa", entry_count=3):
            with LogContext(entry_count=5, template="export.ggsa.twig"):
                assert get_log_context() == {
                    "export_id": "ggsa",
                    "entry_count": 5,
                    "template": "export.ggsa.twig",
                }
            assert get_log_context() == {"export_id": "ggsa", "entry_count": 3}

        assert get_log_context() == {}

    def test_context_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with LogContext(export_id="ggsa"):
                raise RuntimeError("render failed")

        assert get_log_context() == {}

    def test_context_adds_fields_to_logs(self, tmp_path):
        """Test context manager adds fields to log records."""
        log_file = tmp_path / "test.log"
        configure_logging(
            LoggingConfig(
                log_level="INFO",
                log_format="json",
                enable_console=False,
                log_file=str(log_file),
            )
        )

        logger = logging.getLogger("test_module")
        with LogContext(export_id="ggsa", entry_count=12):
            logger.info("Test message")
        logger.info("Outside")

        for handler in logging.getLogger().handlers:
            handler.flush()

        inside, outside = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert inside["export_id"] == "ggsa"
        assert inside["entry_count"] == 12
        assert "export_id" not in outside


class TestLogFunctionCall:
    """Test the log_function_call decorator."""

    def test_logs_entry_and_exit(self, caplog):
        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(2, 3) == 5

        messages = [record.getMessage() for record in caplog.records]
        assert any(m.startswith("Entering") and "add" in m for m in messages)
        assert any(m.startswith("Exiting") and "add" in m for m in messages)

    def test_custom_level(self, caplog):
        @log_function_call(level="INFO")
        def noop():
            return None

        with caplog.at_level(logging.INFO):
            noop()

        assert all(record.levelno == logging.INFO for record in caplog.records)
        assert len(caplog.records) == 2

    def test_exception_is_logged_and_reraised(self, caplog):
        @log_function_call
        def fail():
            raise ValueError("bad payload")

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ValueError, match="bad payload"):
                fail()

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "ValueError: bad payload" in errors[0].getMessage()

    def test_preserves_metadata(self):
        @log_function_call
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
