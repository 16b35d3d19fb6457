"""
Domain repository interfaces.
"""

from notaire.domain.repositories.i_project_repository import IProjectRepository
from notaire.domain.repositories.i_vote_repository import IVoteRepository
from notaire.domain.repositories.i_wallet_profile_repository import (
    IWalletProfileRepository,
)

__all__ = [
    "IProjectRepository",
    "IVoteRepository",
    "IWalletProfileRepository",
]
