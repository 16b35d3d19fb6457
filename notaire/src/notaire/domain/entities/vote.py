"""
Vote entity - one burn-backed vote per wallet per project.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class VoteType(str, Enum):
    """Vote direction."""

    UPVOTE = "Upvote"
    DOWNVOTE = "Downvote"


@dataclass
class Vote:
    """Recorded vote backed by a verified burn transaction."""

    project_id: str
    voter_wallet: str
    vote_type: VoteType
    amount: int
    transaction_signature: str
    voted_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "project_id": self.project_id,
            "voter_wallet": self.voter_wallet,
            "vote_type": self.vote_type.value,
            "amount": self.amount,
            "transaction_signature": self.transaction_signature,
            "voted_at": self.voted_at.isoformat(),
        }
