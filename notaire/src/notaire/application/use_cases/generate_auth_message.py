"""
Generate Auth Message use case.
"""

import secrets
import time

from notaire.domain.exceptions import ValidationError
from notaire.domain.value_objects.wallet_address import WalletAddress

AUTH_MESSAGE_TEMPLATE = (
    "Sign this message to authenticate with {app_name}.\n\n"
    "Wallet: {wallet}\n"
    "Nonce: {nonce}\n"
    "Timestamp: {timestamp}"
)


class GenerateAuthMessage:
    """
    Build the challenge text a wallet signs to log in.

    The nonce and timestamp are advisory: nothing is stored server-side, and
    authentication accepts any message the wallet signed.
    """

    def __init__(self, app_name: str):
        self.app_name = app_name

    def execute(self, wallet_address: str) -> str:
        """
        Generate challenge for a wallet.

        Args:
            wallet_address: Wallet that will sign

        Returns:
            Challenge text

        Raises:
            ValidationError: If wallet address is invalid
        """
        try:
            wallet = WalletAddress(wallet_address)
        except ValueError as e:
            raise ValidationError(field="wallet_address", reason=str(e))

        return AUTH_MESSAGE_TEMPLATE.format(
            app_name=self.app_name,
            wallet=wallet,
            nonce=secrets.token_urlsafe(16),
            timestamp=int(time.time() * 1000),
        )
