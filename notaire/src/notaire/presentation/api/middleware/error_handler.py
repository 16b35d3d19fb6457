"""
Global error handling middleware.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from notaire.domain.exceptions import NotaireException
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DUPLICATE_ENTITY": status.HTTP_409_CONFLICT,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "VERIFICATION_FAILED": status.HTTP_400_BAD_REQUEST,
    "LEDGER_RPC_ERROR": status.HTTP_502_BAD_GATEWAY,
}


async def notaire_exception_handler(
    request: Request, exc: NotaireException
) -> JSONResponse:
    """
    Handle Notaire domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code = STATUS_CODE_MAP.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )

    if status_code >= 500:
        logger.error(
            f"Unhandled domain error on {request.url.path}: {exc.message}",
            extra={"code": exc.code},
        )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
        },
    )
