"""Structured JSON logging for SDK requests"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

SDK_LOGGER_NAME = "rozetkapay"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record.setdefault("service", SDK_LOGGER_NAME)


def setup_logging(level: str = "INFO", stream=None) -> logging.Logger:
    """Send SDK logs to stdout (or the given stream) as JSON lines"""
    logger = logging.getLogger(SDK_LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def log_request(
    logger: logging.Logger,
    service: str,
    method: str,
    path: str,
    status_code: Optional[int],
    duration_ms: float,
) -> None:
    """Log one completed gateway call; bodies and credentials are never included"""
    level = logging.INFO if status_code is not None and status_code < 400 else logging.WARNING
    logger.log(
        level,
        "Gateway request completed",
        extra={
            "service": service,
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
        },
    )
