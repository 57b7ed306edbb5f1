"""Tests for structlog setup."""

from __future__ import annotations

import io
import json
import logging

import structlog

from cspguard.logging_config import _drop_blank_fields, _logger_as_component, setup_logging


class TestSetupLogging:
    def test_json_fields(self):
        stream = io.StringIO()
        setup_logging(log_level="debug", json_format=True, stream=stream)
        structlog.get_logger("cspguard.policy.parser").warning(
            "duplicate_directive_ignored", directive="img-src"
        )
        log = json.loads(stream.getvalue().strip())
        assert log["event"] == "duplicate_directive_ignored"
        assert log["level"] == "warning"
        assert log["component"] == "policy.parser"
        assert log["directive"] == "img-src"
        assert "timestamp" in log

    def test_level_filtering(self):
        stream = io.StringIO()
        setup_logging(log_level="warning", json_format=True, stream=stream)
        structlog.get_logger("cspguard.test").info("hidden")
        assert stream.getvalue() == ""

    def test_invalid_level_defaults_to_info(self):
        setup_logging(log_level="LOUD", json_format=True, stream=io.StringIO())
        assert logging.getLogger().level == logging.INFO

    def test_console_renderer(self):
        stream = io.StringIO()
        setup_logging(log_level="info", json_format=False, stream=stream)
        structlog.get_logger("cspguard.test").info("csp_violation_reported", blocked_uri="inline")
        output = stream.getvalue()
        assert "csp_violation_reported" in output
        assert "blocked_uri=inline" in output

    def test_defaults_to_stderr(self, capfd):
        setup_logging(log_level="info", json_format=True)
        structlog.get_logger("cspguard.test").info("to_stderr")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "to_stderr" in captured.err

    def test_single_handler(self):
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())
        assert len(logging.getLogger().handlers) == 1


class TestLoggerAsComponent:
    def test_renames_and_strips_prefix(self):
        event = {"event": "x", "logger": "cspguard.api.report_routes"}
        assert _logger_as_component(None, None, event) == {"event": "x", "component": "api.report_routes"}

    def test_no_logger_key(self):
        event = {"event": "x"}
        assert _logger_as_component(None, None, event) == {"event": "x"}


class TestDropBlankFields:
    def test_empty_strings_dropped(self):
        event = {"event": "csp_violation_reported", "blocked_uri": "inline", "referrer": "", "line_number": 0}
        assert _drop_blank_fields(None, None, event) == {
            "event": "csp_violation_reported",
            "blocked_uri": "inline",
            "line_number": 0,
        }

    def test_violation_log_omits_unset_report_fields(self):
        stream = io.StringIO()
        setup_logging(json_format=True, stream=stream)
        structlog.get_logger("cspguard.api.report_routes").warning(
            "csp_violation_reported", blocked_uri="eval", referrer="", source_file=""
        )
        log = json.loads(stream.getvalue().strip())
        assert log["blocked_uri"] == "eval"
        assert "referrer" not in log
        assert "source_file" not in log


class TestStdlibLoggers:
    def test_plain_logging_gets_structured_fields(self):
        stream = io.StringIO()
        setup_logging(json_format=True, stream=stream)
        logging.getLogger("uvicorn.error").warning("server started")
        log = json.loads(stream.getvalue().strip())
        assert log["event"] == "server started"
        assert log["level"] == "warning"
        assert log["component"] == "uvicorn.error"
        assert "timestamp" in log
