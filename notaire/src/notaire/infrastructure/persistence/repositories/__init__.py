"""
Repository implementations.
"""

from notaire.infrastructure.persistence.repositories.wallet_profile_repository import (
    WalletProfileRepository,
)

__all__ = ["WalletProfileRepository"]
