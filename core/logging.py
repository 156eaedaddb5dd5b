"""
Structured JSON logging, one line per record.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from core.config_loader import settings

ROOT_LOGGER = "shiftboard"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "request_id"):
            log_data["request_id"] = record.request_id
        if record.exc_info and record.exc_info[1]:
            log_data["error"] = str(record.exc_info[1])
            log_data["error_type"] = type(record.exc_info[1]).__name__
            log_data["traceback"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach the JSON handler to the application's root logger once."""
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. ``shiftboard.storage.memory``."""
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
