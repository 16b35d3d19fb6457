"""
Vote repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from notaire.domain.entities.vote import Vote


class IVoteRepository(ABC):
    """Persistence operations the vote flow needs."""

    @abstractmethod
    async def get_vote(self, project_id: str, voter_wallet: str) -> Optional[Vote]:
        """Return the existing vote of a wallet on a project, if any."""

    @abstractmethod
    async def is_transaction_used(self, transaction_signature: str) -> bool:
        """True when a recorded vote already references this transaction."""

    @abstractmethod
    async def record_vote(self, vote: Vote) -> Vote:
        """
        Persist a vote.

        Args:
            vote: Vote backed by a verified burn

        Returns:
            Stored Vote

        Raises:
            DuplicateEntityError: If the wallet already voted on the project
                or the transaction already backs another vote
        """
