"""
Monitoring infrastructure (structured logging).
"""

from notaire.infrastructure.monitoring.logger import (
    JSONFormatter,
    get_logger,
    get_request_id,
    set_request_id,
    setup_logging,
)

__all__ = [
    "JSONFormatter",
    "get_logger",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
