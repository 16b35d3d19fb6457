"""
Authentication Data Transfer Objects.
"""

from dataclasses import dataclass

from notaire.domain.entities.wallet_profile import WalletProfile


@dataclass
class AuthenticatedSession:
    """Result of a successful wallet authentication."""

    access_token: str
    profile: WalletProfile
    token_type: str = "bearer"
