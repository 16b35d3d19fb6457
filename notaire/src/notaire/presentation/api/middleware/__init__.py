"""
API middleware.
"""

from notaire.presentation.api.middleware.error_handler import (
    notaire_exception_handler,
)
from notaire.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = ["RequestIDMiddleware", "notaire_exception_handler"]
