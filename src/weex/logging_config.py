"""
Logging setup for Weex.

Configures the root ``weex`` logger with a console handler and an optional
rotating file handler. Both honour the ``log_*`` fields of
:class:`weex.config.Settings`.
"""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from weex.config import Settings, settings as default_settings

STANDARD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


class _ContextFilter(logging.Filter):
    def __init__(self, context: str) -> None:
        super().__init__()
        self.context = context

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = self.context
        return True


def _make_formatter(config: Settings) -> logging.Formatter:
    if config.log_format == "json":
        return JsonFormatter()
    return logging.Formatter(STANDARD_FORMAT)


def setup_logging(
    context: str = "cli", config: Optional[Settings] = None
) -> logging.Logger:
    """
    Configure logging for a Weex entry point.

    Args:
        context: Name of the entry point (used for the log file name and
                 attached to JSON records)
        config: Settings to use (defaults to the global settings)

    Returns:
        The configured ``weex`` logger

    Raises:
        PermissionError: If file logging is enabled but the log directory
                         cannot be created
    """
    config = config or default_settings
    logger = logging.getLogger("weex")
    logger.setLevel(config.log_level.upper())

    # Replace handlers from any previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = _make_formatter(config)
    context_filter = _ContextFilter(context)

    if config.log_console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        logger.addHandler(console_handler)

    if config.log_file_enabled:
        log_dir = config.log_directory
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / f"{context}.log",
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
