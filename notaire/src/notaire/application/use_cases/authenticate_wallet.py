"""
Authenticate Wallet use case.
"""

from typing import Union

from notaire.application.dto.auth_dto import AuthenticatedSession
from notaire.domain.exceptions import InvalidSignatureError
from notaire.domain.repositories.i_wallet_profile_repository import (
    IWalletProfileRepository,
)
from notaire.domain.services.i_wallet_authenticator import IWalletAuthenticator
from notaire.infrastructure.auth.jwt_handler import create_access_token
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class AuthenticateWallet:
    """
    Authenticate a wallet via signature and open a session.

    Business rules:
    - Signature must be valid for given wallet address
    - Profile is created on first authentication, loaded afterwards
    - Re-authentication never resets profile fields
    """

    def __init__(
        self,
        profile_repository: IWalletProfileRepository,
        wallet_authenticator: IWalletAuthenticator,
    ):
        """
        Initialize use case with dependencies.

        Args:
            profile_repository: Repository for wallet profiles
            wallet_authenticator: Service for signature verification
        """
        self.profile_repository = profile_repository
        self.wallet_authenticator = wallet_authenticator

    async def execute(
        self,
        wallet_address: str,
        message: str,
        signature: Union[str, bytes],
    ) -> AuthenticatedSession:
        """
        Execute wallet authentication.

        Args:
            wallet_address: Wallet address claiming ownership
            message: Challenge text that was signed
            signature: Signature (base58 or hex string, or raw bytes)

        Returns:
            AuthenticatedSession with access token and profile

        Raises:
            InvalidSignatureError: If signature verification fails
        """
        # 1. Verify signature
        is_valid = await self.wallet_authenticator.verify_signature(
            wallet_address=wallet_address,
            message=message,
            signature=signature,
        )

        if not is_valid:
            logger.warning(
                "Wallet authentication rejected",
                extra={
                    "wallet_address": wallet_address,
                    "message_length": len(message),
                },
            )
            raise InvalidSignatureError()

        # 2. Load or create profile
        profile = await self.profile_repository.get_or_create(wallet_address)

        # 3. Issue session
        token = create_access_token(wallet_address=wallet_address)

        logger.info("Wallet authenticated", extra={"wallet_address": wallet_address})
        return AuthenticatedSession(access_token=token, profile=profile)
