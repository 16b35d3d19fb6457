"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from notaire.application.use_cases.authenticate_wallet import AuthenticateWallet
from notaire.application.use_cases.generate_auth_message import (
    GenerateAuthMessage,
)
from notaire.application.use_cases.get_wallet_profile import GetWalletProfile
from notaire.application.use_cases.update_wallet_profile import (
    UpdateWalletProfile,
)
from notaire.di.container import get_container
from notaire.domain.services.i_burn_verifier import IBurnVerifier

# ================================================================
# Database Dependencies
# ================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Session commits after the request and rolls back on error.
    """
    container = get_container()
    async with container.database.session() as session:
        yield session


# ================================================================
# Service Dependencies
# ================================================================


def get_burn_verifier() -> IBurnVerifier:
    """Get burn verifier service dependency."""
    return get_container().burn_verifier


# ================================================================
# Use Case Dependencies
# ================================================================


def get_generate_auth_message() -> GenerateAuthMessage:
    """Get GenerateAuthMessage use case dependency."""
    return get_container().get_generate_auth_message()


def get_authenticate_wallet(
    session: AsyncSession = Depends(get_db_session),
) -> AuthenticateWallet:
    """Get AuthenticateWallet use case dependency."""
    return get_container().get_authenticate_wallet(session)


def get_get_wallet_profile(
    session: AsyncSession = Depends(get_db_session),
) -> GetWalletProfile:
    """Get GetWalletProfile use case dependency."""
    return get_container().get_get_wallet_profile(session)


def get_update_wallet_profile(
    session: AsyncSession = Depends(get_db_session),
) -> UpdateWalletProfile:
    """Get UpdateWalletProfile use case dependency."""
    return get_container().get_update_wallet_profile(session)
