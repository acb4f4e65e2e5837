"""Structured JSON logging."""

from __future__ import annotations

import logging
import sys
from typing import Any

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "handset-pricing"


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter that stamps every record with level and service name."""

    def add_fields(
        self,
        log_data: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_data, record, message_dict)
        log_data["level"] = record.levelname
        log_data["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO") -> None:
    """Send every log record to stdout as one JSON object per line."""
    root = logging.getLogger()
    root.setLevel(level)

    # Replace whatever handlers an earlier call (or uvicorn) installed
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceJsonFormatter("%(asctime)s %(name)s %(message)s"))
    root.addHandler(handler)
