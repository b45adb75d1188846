"""
Tests for the structured logging infrastructure.

Verifies that:
- JSON format is correct
- Console format is readable
- Convenience functions emit the expected events
- Timer and timed decorator work
"""

import json
import logging
import sys

import pytest

from core.structured_logging import (
    ConsoleFormatter,
    JSONFormatter,
    LogContext,
    Timer,
    get_logger,
    log_error,
    log_query_turn,
    timed,
)


def make_record(msg="Test message", level=logging.INFO, name="test"):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestJSONFormatter:
    """Tests for JSON log formatting."""

    def test_basic_format(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["message"] == "Test message"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields(self):
        record = make_record()
        record.request_id = "abc123"
        record.user_query = "samsung under ₹20000"
        record.response_shape = "top_pick"
        record.not_whitelisted = "dropped"

        data = json.loads(JSONFormatter().format(record))
        assert data["request_id"] == "abc123"
        assert data["user_query"] == "samsung under ₹20000"
        assert data["response_shape"] == "top_pick"
        assert "not_whitelisted" not in data

    def test_none_fields_skipped(self):
        record = make_record()
        record.brand = None
        assert "brand" not in json.loads(JSONFormatter().format(record))

    def test_exception_info(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord(
                name="test", level=logging.ERROR, pathname="", lineno=0,
                msg="failed", args=(), exc_info=sys.exc_info(),
            )
        data = json.loads(JSONFormatter().format(record))
        assert data["error_type"] == "ValueError"
        assert "ValueError: bad" in data["stack_trace"]


class TestConsoleFormatter:
    """Tests for console formatting."""

    def test_plain_format(self):
        record = make_record()
        record.request_id = "abc123"
        record.event = "query_turn"
        output = ConsoleFormatter(use_color=False).format(record)
        assert "| INFO     | test | Test message" in output
        assert "request_id=abc123" in output
        assert "event=query_turn" in output
        assert "\033[" not in output


class TestGetLogger:
    """Logger namespacing."""

    def test_namespaced(self):
        assert get_logger("core.intent").name == "phonefinder.core.intent"

    def test_already_namespaced(self):
        assert get_logger("phonefinder.api").name == "phonefinder.api"

    def test_cached(self):
        assert get_logger("x") is get_logger("x")


class TestConvenienceFunctions:
    """Convenience functions emit structured events."""

    def test_log_query_turn(self, caplog):
        caplog.set_level(logging.INFO, logger="phonefinder")
        log_query_turn(
            user_query="samsung phone under 20000",
            query_kind="search",
            response_shape="top_pick",
            products_found=1,
            products_shown=1,
            filters={"brand": "samsung", "budget": 20000},
            response_time_ms=1.23456,
        )
        record = next(r for r in caplog.records if getattr(r, "event", None) == "query_turn")
        assert record.response_shape == "top_pick"
        assert record.brand == "samsung"
        assert record.budget == 20000
        assert record.features is None
        assert record.response_time_ms == 1.23

    def test_log_error(self, caplog):
        caplog.set_level(logging.ERROR, logger="phonefinder")
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            log_error(e, context="test")
        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert "boom" in record.getMessage()

    def test_log_context_logs_and_reraises(self, caplog):
        caplog.set_level(logging.INFO, logger="phonefinder")
        with pytest.raises(KeyError):
            with LogContext(request_id="req1") as ctx:
                ctx.log_request("/api/chat")
                raise KeyError("missing")
        events = [getattr(r, "event", None) for r in caplog.records]
        assert "request_received" in events
        assert "error" in events


class TestTiming:
    """Timer and timed decorator."""

    def test_timer(self):
        with Timer() as t:
            sum(range(1000))
        assert t.elapsed_ms >= 0.0
        assert t.end_time is not None

    def test_timed_returns_result(self):
        @timed("unit_test")
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    def test_timed_reraises(self, caplog):
        caplog.set_level(logging.ERROR, logger="phonefinder")

        @timed("unit_test")
        def fail():
            raise ValueError("nope")

        with pytest.raises(ValueError):
            fail()
        assert any(getattr(r, "event", None) == "unit_test_error" for r in caplog.records)
