"""
Authentication middleware for JWT token validation.
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from notaire.domain.exceptions import ExpiredTokenError, InvalidTokenError
from notaire.infrastructure.auth.jwt_handler import Session, decode_access_token

# Bearer token security scheme
security = HTTPBearer()


async def get_current_session(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> Session:
    """
    Decode the bearer token of the current request.

    Args:
        credentials: HTTP Authorization header with Bearer token

    Returns:
        Session

    Raises:
        HTTPException: 401 if token invalid or expired
    """
    try:
        return decode_access_token(credentials.credentials)
    except ExpiredTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    except InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_wallet(
    session: Session = Depends(get_current_session),
) -> str:
    """
    Extract wallet address from the authenticated session.

    Returns:
        Wallet address string

    Raises:
        HTTPException: 403 if the session is not bound to a wallet
    """
    if not session.wallet_address:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Wallet session required",
        )
    return session.wallet_address
