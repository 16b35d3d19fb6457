"""
JWT token handler for authentication.

Sessions are stateless: a token is bound either to a wallet (``wallet``
claim) or to a numeric account (``account_id`` claim).

Notaire itself only issues wallet sessions. Account sessions are the hook
for a host application's email/password login: the host calls
``create_access_token(account_id=...)`` and every notaire route that needs
a wallet answers such a session with 403.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from notaire.config.settings import get_settings
from notaire.domain.exceptions.auth import ExpiredTokenError, InvalidTokenError

TOKEN_TYPE = "access"


@dataclass(frozen=True)
class Session:
    """Decoded session claims."""

    wallet_address: Optional[str]
    account_id: Optional[int]
    issued_at: datetime
    expires_at: datetime


def create_access_token(
    wallet_address: Optional[str] = None,
    account_id: Optional[int] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create JWT access token.

    Exactly one of ``wallet_address`` and ``account_id`` must be given.

    Args:
        wallet_address: Solana wallet address
        account_id: Numeric account identifier
        expires_delta: Lifetime override (default: JWT_EXPIRATION_HOURS)

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token(wallet_address="ABC123...")
    """
    if (wallet_address is None) == (account_id is None):
        raise ValueError("Provide exactly one of wallet_address or account_id")

    settings = get_settings()
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.JWT_EXPIRATION_HOURS)

    payload = {
        "iat": now,
        "exp": now + expires_delta,
        "type": TOKEN_TYPE,
    }
    if wallet_address is not None:
        payload["sub"] = wallet_address
        payload["wallet"] = wallet_address
    else:
        payload["sub"] = str(account_id)
        payload["account_id"] = account_id

    return jwt.encode(
        payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM
    )


def decode_access_token(token: str) -> Session:
    """
    Decode and validate JWT access token.

    Args:
        token: JWT token string

    Returns:
        Session

    Raises:
        ExpiredTokenError: If token has expired
        InvalidTokenError: If token is invalid or malformed
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except JWTError:
        raise InvalidTokenError()

    if payload.get("type") != TOKEN_TYPE:
        raise InvalidTokenError()

    wallet = payload.get("wallet")
    account_id = payload.get("account_id")
    if not wallet and account_id is None:
        raise InvalidTokenError()
    if account_id is not None and not isinstance(account_id, int):
        raise InvalidTokenError()
    if "iat" not in payload or "exp" not in payload:
        raise InvalidTokenError()

    return Session(
        wallet_address=wallet or None,
        account_id=account_id,
        issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


def extract_wallet_address(token: str) -> str:
    """
    Extract wallet address from token.

    Raises:
        InvalidTokenError: If token is invalid or not wallet-bound
    """
    session = decode_access_token(token)
    if not session.wallet_address:
        raise InvalidTokenError()
    return session.wallet_address
