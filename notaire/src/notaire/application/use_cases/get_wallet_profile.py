"""
Get Wallet Profile use case.
"""

from notaire.domain.entities.wallet_profile import WalletProfile
from notaire.domain.exceptions import EntityNotFoundError
from notaire.domain.repositories.i_wallet_profile_repository import (
    IWalletProfileRepository,
)


class GetWalletProfile:
    """Load the profile of the authenticated wallet."""

    def __init__(self, profile_repository: IWalletProfileRepository):
        self.profile_repository = profile_repository

    async def execute(self, wallet_address: str) -> WalletProfile:
        """
        Args:
            wallet_address: Wallet from the session

        Returns:
            WalletProfile

        Raises:
            EntityNotFoundError: If the wallet never authenticated
        """
        profile = await self.profile_repository.get_by_wallet(wallet_address)
        if profile is None:
            raise EntityNotFoundError("WalletProfile", wallet_address)
        return profile
