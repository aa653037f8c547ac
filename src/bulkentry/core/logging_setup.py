"""Logging configuration driven by AppSettings."""

from __future__ import annotations

import json
import logging

from bulkentry.core.config import AppSettings

_CONSOLE_PATTERN = "%(asctime)s %(levelname)s %(name)s run_id=%(run_id)s %(message)s"


class _JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "run_id": getattr(record, "run_id", "-"),
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _resolve_level(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return _JsonFormatter()
    return logging.Formatter(_CONSOLE_PATTERN, defaults={"run_id": "-"})


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure root logging from settings; safe to call more than once."""
    if settings is None:
        settings = AppSettings()
    level = _resolve_level(settings.log_level)
    formatter = _build_formatter(settings.log_format)
    root_logger = logging.getLogger()

    if root_logger.handlers:
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
        return

    logging.basicConfig(level=level)
    for handler in logging.getLogger().handlers:
        handler.setFormatter(formatter)
