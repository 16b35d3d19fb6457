"""
Structured logging for Notaire.

Production emits one JSON object per line so that verification rejections
can be queried by ``tx_signature`` and ``reason``; other environments get
pipe-delimited text.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Optional
from uuid import uuid4

SERVICE_NAME = "notaire"

# Request ID of the HTTP request being served, if any
request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}

# Third-party loggers that are too chatty below WARNING
_QUIET_LOGGERS = ("asyncio", "aiohttp.access", "httpx", "sqlalchemy.engine")


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Base fields are service, timestamp, level, logger and message, followed by
    the request ID, exception text, any ``extra=`` fields and the call site.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "service": SERVICE_NAME,
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = request_id_ctx.get()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        log_data["file"] = record.pathname
        log_data["line"] = record.lineno
        log_data["function"] = record.funcName

        # Ledger payloads may carry bytes or enums
        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Use JSON format (True) or plain text (False)
    """
    log_level = getattr(logging, level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if json_logs:
        handler.setFormatter(JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get logger with given name (usually __name__)."""
    return logging.getLogger(name)


def set_request_id(request_id: Optional[str] = None) -> str:
    """
    Set request ID for current context.

    Args:
        request_id: Request ID (generates UUID if None)

    Returns:
        Request ID that was set
    """
    if request_id is None:
        request_id = str(uuid4())
    request_id_ctx.set(request_id)
    return request_id


def get_request_id() -> Optional[str]:
    """Get request ID from current context."""
    return request_id_ctx.get()
