"""
Tests for formatting and logging utilities.
"""

import json
import logging

import pytest

from forge_analytics.utils import format_currency, format_number, format_percent, log_call
from forge_analytics.utils.logger import ColoredFormatter, JSONFormatter, LOG_FORMAT


class TestFormatting:
    """Test display value formatting"""

    @pytest.mark.parametrize("num,expected", [
        (1500000, "1.5M"),
        (2500, "2.5K"),
        (1000, "1.0K"),
        (999, "999"),
        (50.0, "50"),
        (3.2, "3.2"),
        (0, "0"),
    ])
    def test_format_number(self, num, expected):
        assert format_number(num) == expected

    def test_format_currency(self):
        assert format_currency(50000) == "$50.0K"
        assert format_currency(0) == "$0"

    def test_format_percent(self):
        assert format_percent(45) == "45.0%"
        assert format_percent(-1.8, signed=True) == "-1.8%"
        assert format_percent(0, signed=True) == "+0.0%"
        assert format_percent(12.346, decimals=2) == "12.35%"


class TestLogging:
    """Test log formatters and the call logging decorator"""

    def _record(self, level=logging.INFO):
        return logging.LogRecord(
            "forge_analytics.test", level, __file__, 10, "hello %s", ("world",), None
        )

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(self._record()))

        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "forge_analytics.test"

    def test_colored_formatter_leaves_record_untouched(self):
        record = self._record(logging.WARNING)

        output = ColoredFormatter(LOG_FORMAT).format(record)

        assert "\033[33m" in output
        assert record.levelname == "WARNING"

    def test_log_call_sync(self, caplog):
        @log_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.INFO):
            assert add(1, 2) == 3

        assert "Call completed: add" in caplog.text

    def test_log_call_reraises(self, caplog):
        @log_call
        def boom():
            raise ValueError("bad input")

        with caplog.at_level(logging.WARNING):
            with pytest.raises(ValueError):
                boom()

        assert "Call failed: boom" in caplog.text
        assert "bad input" in caplog.text

    @pytest.mark.asyncio
    async def test_log_call_async(self, caplog):
        @log_call
        async def fetch():
            return "ok"

        with caplog.at_level(logging.INFO):
            assert await fetch() == "ok"

        assert "Call completed: fetch" in caplog.text
