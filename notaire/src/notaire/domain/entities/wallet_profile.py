"""
WalletProfile entity - Domain model for wallet-authenticated users.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class WalletProfile:
    """
    Wallet profile - minimal Web3 identity.

    Created on the first successful wallet authentication and loaded on every
    later one. Authentication never resets the optional profile fields.
    """

    wallet_address: str = field(default="")
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate profile data after initialization."""
        if not self.wallet_address:
            raise ValueError("Wallet address is required")

        # Solana wallet address format (Base58, 32-44 chars)
        if not (32 <= len(self.wallet_address) <= 44):
            raise ValueError(
                f"Invalid wallet address length: {len(self.wallet_address)}"
            )

    def update_profile(
        self,
        username: Optional[str] = None,
        full_name: Optional[str] = None,
    ) -> None:
        """
        Update editable profile fields.

        None leaves a field unchanged, an empty string clears it.

        Args:
            username: New username
            full_name: New full name
        """
        if username is not None:
            self.username = username or None
        if full_name is not None:
            self.full_name = full_name or None
        self.updated_at = datetime.now()

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "wallet_address": self.wallet_address,
            "username": self.username,
            "full_name": self.full_name,
            "avatar_url": self.avatar_url,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
