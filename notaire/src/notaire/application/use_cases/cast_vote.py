"""
Cast Vote use case.
"""

from notaire.domain.entities.vote import Vote, VoteType
from notaire.domain.exceptions import (
    BurnVerificationFailedError,
    DuplicateEntityError,
    ValidationError,
)
from notaire.domain.repositories.i_vote_repository import IVoteRepository
from notaire.domain.services.i_burn_verifier import IBurnVerifier
from notaire.domain.services.i_score_engine import IScoreEngine
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

VOTE_REJECTED_MESSAGE = (
    "Invalid vote transaction. Burn must be signed by the voting wallet "
    "and meet the minimum amount."
)


class CastVote:
    """
    Record one burn-backed vote per wallet per project.

    Business rules:
    - A wallet votes at most once per project
    - A burn transaction backs at most one vote
    - The burn must be signed by the voter and meet the vote threshold
    """

    def __init__(
        self,
        vote_repository: IVoteRepository,
        burn_verifier: IBurnVerifier,
        score_engine: IScoreEngine,
        vote_burn_amount: int,
    ):
        """
        Initialize use case with dependencies.

        Args:
            vote_repository: Repository for votes
            burn_verifier: Burn-proof verifier
            score_engine: Transparency score engine
            vote_burn_amount: Minimum burn per vote (base units)
        """
        self.vote_repository = vote_repository
        self.burn_verifier = burn_verifier
        self.score_engine = score_engine
        self.vote_burn_amount = vote_burn_amount

    async def execute(
        self,
        project_id: str,
        voter_wallet: str,
        vote_type: str,
        amount: int,
        transaction_ref: str,
    ) -> Vote:
        """
        Cast a vote.

        Args:
            project_id: Project voted on
            voter_wallet: Authenticated voter wallet
            vote_type: "Upvote" or "Downvote"
            amount: Burned amount the client reports (base units)
            transaction_ref: Burn transaction signature

        Returns:
            Recorded Vote

        Raises:
            ValidationError: If vote_type or input is invalid
            DuplicateEntityError: If wallet already voted or tx already used
            BurnVerificationFailedError: If the burn proof is rejected
        """
        try:
            parsed_type = VoteType(vote_type)
        except ValueError:
            raise ValidationError(
                field="vote_type", reason="must be Upvote or Downvote"
            )
        if not transaction_ref:
            raise ValidationError(field="transaction_ref", reason="required")

        if await self.vote_repository.get_vote(project_id, voter_wallet):
            raise DuplicateEntityError("Vote", f"wallet {voter_wallet}")

        if await self.vote_repository.is_transaction_used(transaction_ref):
            raise DuplicateEntityError("Vote", f"transaction {transaction_ref}")

        verified = await self.burn_verifier.verify_vote_burn(
            transaction_ref,
            voter_wallet,
            self.vote_burn_amount,
        )
        if not verified:
            raise BurnVerificationFailedError(VOTE_REJECTED_MESSAGE)

        vote = await self.vote_repository.record_vote(
            Vote(
                project_id=project_id,
                voter_wallet=voter_wallet,
                vote_type=parsed_type,
                amount=amount,
                transaction_signature=transaction_ref,
            )
        )
        await self.score_engine.recompute_score(project_id)

        logger.info(
            "Vote recorded",
            extra={
                "project_id": project_id,
                "vote_type": parsed_type.value,
                "tx_signature": transaction_ref,
            },
        )
        return vote
