"""Tests for logging setup and the parse trace"""
import io
import json
import logging
import sys

from optclaim.core.logging import JSONFormatter, resolve_log_level, setup_logging
from optclaim.parsing.options import FlagOption, StringOption


class TestJSONFormatter:
    """Test structured log records"""

    def test_includes_custom_record_fields(self):
        """JSONFormatter should include custom fields from logging extra."""
        formatter = JSONFormatter()
        record = logging.LogRecord(
            name="optclaim.parsing.parser",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=42,
            msg="Expanded %d arguments",
            args=(3,),
            exc_info=None,
        )
        record.tokens = ["-a", "-b", "value"]
        record.extra_fields = {"cycle": 1}

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Expanded 3 arguments"
        assert payload["level"] == "DEBUG"
        assert payload["logger"] == "optclaim.parsing.parser"
        assert payload["line"] == 42
        assert payload["tokens"] == ["-a", "-b", "value"]
        assert payload["cycle"] == 1
        assert "extra_fields" not in payload

    def test_broken_message_format(self):
        formatter = JSONFormatter()
        record = logging.LogRecord("optclaim", logging.INFO, __file__, 1, "%d tokens", ("many",), None)
        payload = json.loads(formatter.format(record))
        assert payload["message"] == "%d tokens [log-message-format-error]"

    def test_exception_info(self):
        formatter = JSONFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.makeLogRecord({"msg": "failed", "exc_info": sys.exc_info()})
        payload = json.loads(formatter.format(record))
        assert "ValueError: boom" in payload["exception"]


class TestResolveLogLevel:
    """Level priority: argument, then LOG_LEVEL, then INFO"""

    def test_argument_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert resolve_log_level("debug") == "DEBUG"

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert resolve_log_level() == "WARNING"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert resolve_log_level() == "INFO"

    def test_invalid_level_falls_back(self, capsys):
        assert resolve_log_level("LOUD") == "INFO"
        assert "Invalid log level 'LOUD'" in capsys.readouterr().err


class TestSetupLogging:
    """Test console logging for the package logger"""

    def test_text_format(self, package_logger):
        stream = io.StringIO()
        logger = setup_logging("DEBUG", stream=stream)
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert "optclaim - DEBUG - Logging initialized at DEBUG (text)" in stream.getvalue()

    def test_repeated_setup_replaces_handler(self, package_logger):
        setup_logging("INFO", stream=io.StringIO())
        setup_logging("INFO", stream=io.StringIO())
        assert len(package_logger.handlers) == 1

    def test_parse_trace_in_json(self, package_logger, make_parser):
        stream = io.StringIO()
        setup_logging("DEBUG", "json", stream=stream)

        parser = make_parser(StringOption("n"), FlagOption("v"))
        parser.parse(["prog", "-vn", "x"])

        payloads = [json.loads(line) for line in stream.getvalue().splitlines()]
        expanded = next(p for p in payloads if p["message"].startswith("Expanded"))
        assert expanded["tokens"] == ["-v", "-n", "x"]
        assert expanded["logger"] == "optclaim.parsing.parser"

    def test_level_filters_parse_trace(self, package_logger, make_parser):
        stream = io.StringIO()
        setup_logging("WARNING", stream=stream)
        make_parser(FlagOption("v")).parse(["prog", "-v"])
        assert stream.getvalue() == ""
