"""Structured logging configuration for snowflake_loader."""

import logging
import sys
from typing import Optional

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    config_path: Optional[str] = None,
) -> None:
    """Configure logging for snowflake_loader.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
        config_path: Optional configuration file path to include in every record
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("snowflake_loader")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    handler.setFormatter(formatter)
    if config_path:
        handler.addFilter(_ConfigPathFilter(config_path))
    logger.addHandler(handler)


class _ConfigPathFilter(logging.Filter):
    def __init__(self, config_path: str):
        super().__init__()
        self.config_path = config_path

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "config_path"):
            record.config_path = self.config_path
        return True


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "config_path"):
            parts.append(f"config={record.config_path}")

        if hasattr(record, "destination_type"):
            parts.append(f"destination_type={record.destination_type}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)
