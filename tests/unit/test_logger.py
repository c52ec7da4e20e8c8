"""
Test cases for logging setup
"""
import io
import json

import pytest
import structlog

from app.utils.logger import setup_logging


@pytest.fixture
def restore_logging():
    """Rebind log handlers to the real stderr after the test"""
    yield
    setup_logging()


class TestSetupLogging:
    """Test cases for setup_logging"""

    def test_json_records_go_to_given_stream(self, restore_logging):
        stream = io.StringIO()
        setup_logging(level="INFO", log_format="json", stream=stream)

        structlog.get_logger("category.test").info("Category created", assigned_id=55)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "Category created"
        assert record["assigned_id"] == 55
        assert record["level"] == "info"

    def test_records_below_level_are_dropped(self, restore_logging):
        stream = io.StringIO()
        setup_logging(level="WARNING", log_format="json", stream=stream)

        structlog.get_logger("category.test").info("Listed categories", count=2)

        assert stream.getvalue() == ""

    def test_default_stream_is_stderr(self, restore_logging, capsys):
        setup_logging(level="INFO", log_format="json")

        structlog.get_logger("category.test").warning("Validation error")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Validation error" in captured.err
