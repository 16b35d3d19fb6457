"""
Wallet profile repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from notaire.domain.entities.wallet_profile import WalletProfile


class IWalletProfileRepository(ABC):
    """
    Abstract repository interface for WalletProfile entity.

    Implementations handle persistence details (PostgreSQL, in-memory, etc.).
    """

    @abstractmethod
    async def get_by_wallet(self, wallet_address: str) -> Optional[WalletProfile]:
        """
        Get profile by wallet address.

        Args:
            wallet_address: Solana wallet address

        Returns:
            WalletProfile if found, None otherwise
        """

    @abstractmethod
    async def get_or_create(self, wallet_address: str) -> WalletProfile:
        """
        Load the profile for a wallet, creating it on first login.

        Must be idempotent under concurrent first logins for the same
        wallet: exactly one profile exists afterwards and existing profile
        fields are never reset.

        Args:
            wallet_address: Solana wallet address

        Returns:
            Existing or newly created WalletProfile
        """

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[WalletProfile]:
        """
        Get profile by username.

        Args:
            username: Profile username

        Returns:
            WalletProfile if found, None otherwise
        """

    @abstractmethod
    async def update(self, profile: WalletProfile) -> WalletProfile:
        """
        Persist edited profile fields.

        Args:
            profile: Profile with updated data

        Returns:
            Updated WalletProfile

        Raises:
            EntityNotFoundError: If the profile does not exist
            DuplicateEntityError: If the username belongs to another wallet
        """
