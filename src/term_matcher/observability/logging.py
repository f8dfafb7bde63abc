"""Structured JSON logging for matcher diagnostics."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import sys
from typing import Any

import orjson

from term_matcher.config import Settings
from term_matcher.search.models import TermMatch
from term_matcher.search.tokens import Token


_RESERVED_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line.

    Extra fields passed through ``extra=`` are kept. Tokens are written as
    their text and matches as ``{key, term, token}`` so match diagnostics
    stay readable; long strings such as oversized terms are truncated.
    """

    MAX_MESSAGE_LEN = 2000
    MAX_FIELD_LEN = 500

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "message": _truncate(record.getMessage(), self.MAX_MESSAGE_LEN),
            "logger": record.name,
        }
        if "." in record.name:
            entry["component"] = record.name.rsplit(".", 1)[-1]
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                entry[key] = self._field_value(value)

        return orjson.dumps(entry, default=repr).decode("utf-8")

    def _field_value(self, value: Any) -> Any:
        if isinstance(value, Token):
            return _truncate(value.text, self.MAX_FIELD_LEN)
        if isinstance(value, TermMatch):
            return {
                "key": value.key,
                "term": _truncate(value.term, self.MAX_FIELD_LEN),
                "token": _truncate(value.matched_token.text, self.MAX_FIELD_LEN),
            }
        if isinstance(value, str):
            return _truncate(value, self.MAX_FIELD_LEN)
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=str)
        if isinstance(value, (list, tuple)):
            return [self._field_value(item) for item in value]
        return value


def _truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    *,
    logger_levels: dict[str, str] | None = None,
) -> None:
    """Configure root logger with structured JSON output and per-logger overrides.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Emit structured JSON logs when True
        logger_levels: Per-logger level overrides (logger name -> level string)
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)

    for logger_name, logger_level in (logger_levels or {}).items():
        resolved = getattr(logging, logger_level.upper(), logging.INFO)
        logging.getLogger(logger_name).setLevel(resolved)


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Apply ``TERM_MATCHER_LOG_LEVEL`` and ``TERM_MATCHER_LOG_JSON``."""
    if settings is None:
        settings = Settings()
    configure_logging(settings.log_level, settings.log_json)
