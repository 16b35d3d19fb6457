"""
Wallet profile repository implementation.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from notaire.domain.entities.wallet_profile import WalletProfile
from notaire.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from notaire.domain.repositories.i_wallet_profile_repository import (
    IWalletProfileRepository,
)
from notaire.infrastructure.persistence.models import WalletProfileModel


class WalletProfileRepository(IWalletProfileRepository):
    """SQLAlchemy implementation of the wallet profile repository."""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_wallet(self, wallet_address: str) -> Optional[WalletProfile]:
        """
        Get profile by wallet address.

        Args:
            wallet_address: Solana wallet address

        Returns:
            WalletProfile if found, None otherwise
        """
        stmt = select(WalletProfileModel).where(
            WalletProfileModel.wallet_address == wallet_address
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_or_create(self, wallet_address: str) -> WalletProfile:
        """
        Load the profile for a wallet, inserting it on first login.

        ``INSERT ... ON CONFLICT DO NOTHING`` on the wallet key makes
        concurrent first logins converge on one row without resetting
        fields of an existing profile.

        Args:
            wallet_address: Solana wallet address

        Returns:
            Existing or newly created WalletProfile
        """
        now = datetime.now()
        stmt = (
            insert(WalletProfileModel)
            .values(wallet_address=wallet_address, created_at=now, updated_at=now)
            .on_conflict_do_nothing(index_elements=["wallet_address"])
        )
        await self.session.execute(stmt)

        profile = await self.get_by_wallet(wallet_address)
        if profile is None:
            raise RuntimeError(f"Profile for {wallet_address} vanished after upsert")
        return profile

    async def get_by_username(self, username: str) -> Optional[WalletProfile]:
        """
        Get profile by username.

        Args:
            username: Profile username

        Returns:
            WalletProfile if found, None otherwise
        """
        stmt = select(WalletProfileModel).where(
            WalletProfileModel.username == username
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def update(self, profile: WalletProfile) -> WalletProfile:
        """
        Update existing profile.

        Args:
            profile: WalletProfile entity with updated data

        Returns:
            Updated WalletProfile

        Raises:
            EntityNotFoundError: If no profile exists for the wallet
            DuplicateEntityError: If the username is already taken
        """
        stmt = select(WalletProfileModel).where(
            WalletProfileModel.wallet_address == profile.wallet_address
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise EntityNotFoundError("WalletProfile", profile.wallet_address)

        model.username = profile.username
        model.full_name = profile.full_name
        model.updated_at = profile.updated_at

        # Unique username index backs the check done by the use case
        try:
            await self.session.flush()
        except IntegrityError:
            raise DuplicateEntityError("WalletProfile", f"username {profile.username}")
        await self.session.refresh(model)

        return self._to_entity(model)

    def _to_entity(self, model: WalletProfileModel) -> WalletProfile:
        """Convert ORM model to domain entity."""
        return WalletProfile(
            wallet_address=model.wallet_address,
            username=model.username,
            full_name=model.full_name,
            avatar_url=model.avatar_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
