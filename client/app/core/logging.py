"""Logging configuration for the Academix client.

Console-only handlers; the formatter is either plain text or JSON lines
depending on ``settings.log_format``.
"""

import logging
import logging.config
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from client.app.core.settings import get_settings


class ClientJsonFormatter(JsonFormatter):
    """JSON formatter that always carries level, logger name and environment."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["environment"] = get_settings().environment


def build_logging_config(level: str, log_format: str) -> Dict[str, Any]:
    formatter = "json" if log_format == "json" else "standard"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
            "json": {"()": ClientJsonFormatter, "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s"},
        },
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": formatter,
            },
        },
        "loggers": {
            "client": {"handlers": ["console"], "level": level, "propagate": False},
            "httpx": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        },
    }


def configure_logging() -> logging.Logger:
    """Apply the logging config derived from settings and return the package logger."""
    settings = get_settings()
    level = settings.log_level.upper()
    logging.config.dictConfig(build_logging_config(level, settings.log_format))
    logger = logging.getLogger("client")
    logger.info("Logging initialized with level: %s", level)
    return logger
