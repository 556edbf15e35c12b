"""Centralized logging configuration.

Sets up the root logger once per process. JSON output (default in production)
adds timestamp, level, logger name and a service identifier to every record.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "leave-dashboard"


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter that adds standard fields to all log records."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["name"] = record.name
        log_record["service"] = SERVICE_NAME

        if "message" not in log_record:
            log_record["message"] = record.getMessage()


def setup_logging(level: int | str = logging.INFO, format_as_json: bool = True) -> None:
    """Configure application-wide logging.

    Args:
        level: Logging level name or number.
        format_as_json: Use JSON formatting; plain text otherwise.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Avoid duplicate handlers when create_app() runs more than once.
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if format_as_json:
        formatter: logging.Formatter = ServiceJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.info(
        "Logging configuration initialized",
        extra={"format": "json" if format_as_json else "standard", "level": logging.getLevelName(root_logger.level)},
    )
