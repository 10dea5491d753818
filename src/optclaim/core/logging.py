"""Logging helpers for optclaim.

The library itself only creates module loggers under the ``optclaim``
namespace and never configures handlers. ``setup_logging`` is for
applications (and the bundled CLI) that want the parse trace on the console.
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import TextIO

from optclaim.core.colors import ConsoleColors
from optclaim.core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, VALID_LOG_LEVELS

PACKAGE_LOGGER_NAME = "optclaim"

_LOG_RECORD_RESERVED_FIELDS = set(logging.makeLogRecord({}).__dict__.keys()) | {"message", "asctime", "extra_fields"}


def _safe_record_message(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except Exception:
        # Keep logging resilient when message formatting fails (bad placeholders or broken __str__).
        return f"{getattr(record, 'msg', '')!s} [log-message-format-error]"


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging output.

    Each log record is a single JSON object on one line. Custom attributes
    passed through ``extra`` (for example the parsed ``tokens``) become
    top-level fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": _safe_record_message(record),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra_fields = {}
        record_extra_fields = getattr(record, "extra_fields", None)
        if isinstance(record_extra_fields, dict):
            extra_fields.update(record_extra_fields)

        for key, value in record.__dict__.items():
            if key in _LOG_RECORD_RESERVED_FIELDS or key.startswith("_"):
                continue
            extra_fields.setdefault(key, value)

        log_entry.update(extra_fields)
        return json.dumps(log_entry, default=str)


def resolve_log_level(log_level: str | None = None) -> str:
    """Resolve the effective level name.

    Priority: 1) Passed parameter, 2) Environment variable LOG_LEVEL, 3) Default INFO
    """
    if log_level is None:
        log_level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)

    if log_level.upper() not in VALID_LOG_LEVELS:
        warning = f"Warning: Invalid log level '{log_level}', using {DEFAULT_LOG_LEVEL}"
        print(ConsoleColors.warning(warning, sys.stderr), file=sys.stderr)
        return DEFAULT_LOG_LEVEL
    return log_level.upper()


def setup_logging(
    log_level: str | None = None, log_format: str = "text", stream: TextIO | None = None
) -> logging.Logger:
    """Setup console logging for the optclaim package logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format - "text" (default) or "json" for structured logging
        stream: Destination stream (default: sys.stderr)

    Returns:
        The configured package logger
    """
    numeric_level = getattr(logging, resolve_log_level(log_level), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    # Replace handlers from a previous call so repeated setup does not duplicate output
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    handler.setLevel(numeric_level)

    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    logger.debug(f"Logging initialized at {logging.getLevelName(numeric_level)} ({log_format})")
    return logger
