"""
Update Wallet Profile use case.

Edits the username and full name of an authenticated wallet.
"""

from dataclasses import dataclass
from typing import Optional

from notaire.domain.entities.wallet_profile import WalletProfile
from notaire.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from notaire.domain.repositories.i_wallet_profile_repository import (
    IWalletProfileRepository,
)


@dataclass
class UpdateWalletProfileCommand:
    """
    Command to update a wallet profile.

    None leaves a field unchanged, an empty string clears it.
    """

    wallet_address: str
    username: Optional[str] = None
    full_name: Optional[str] = None


class UpdateWalletProfile:
    """
    Use case for editing a wallet profile.

    Usernames are unique across wallets; keeping your own username is
    allowed.
    """

    def __init__(self, profile_repository: IWalletProfileRepository):
        """
        Initialize use case.

        Args:
            profile_repository: Wallet profile repository
        """
        self.profile_repository = profile_repository

    async def execute(self, command: UpdateWalletProfileCommand) -> WalletProfile:
        """
        Update profile fields.

        Args:
            command: Command with updated fields

        Returns:
            Updated WalletProfile

        Raises:
            ValidationError: If the command carries no field to update
            EntityNotFoundError: If the wallet has no profile
            DuplicateEntityError: If another wallet owns the username
        """
        if command.username is None and command.full_name is None:
            raise ValidationError("profile", "No fields to update")

        profile = await self.profile_repository.get_by_wallet(command.wallet_address)
        if profile is None:
            raise EntityNotFoundError("WalletProfile", command.wallet_address)

        if command.username:
            owner = await self.profile_repository.get_by_username(command.username)
            if owner is not None and owner.wallet_address != command.wallet_address:
                raise DuplicateEntityError(
                    "WalletProfile", f"username {command.username}"
                )

        profile.update_profile(
            username=command.username,
            full_name=command.full_name,
        )

        return await self.profile_repository.update(profile)
