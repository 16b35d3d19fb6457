"""
Verify Project Ownership use case.
"""

from datetime import datetime
from typing import Optional

from notaire.domain.entities.project import Project
from notaire.domain.exceptions import (
    BurnVerificationFailedError,
    EntityNotFoundError,
    ValidationError,
)
from notaire.domain.repositories.i_project_repository import IProjectRepository
from notaire.domain.services.i_burn_verifier import IBurnVerifier
from notaire.domain.services.i_score_engine import IScoreEngine
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

OWNERSHIP_REJECTED_MESSAGE = (
    "Invalid verification transaction. "
    "Transaction signer must match project owner wallet."
)


class VerifyProjectOwnership:
    """
    Mark a project as owner-verified once its burn proof checks out.

    Business rules:
    - Only the project owner may submit the proof
    - The burn must be signed by the owner and carry the verification code
    - Score is recomputed after the project is marked verified
    """

    def __init__(
        self,
        project_repository: IProjectRepository,
        burn_verifier: IBurnVerifier,
        score_engine: IScoreEngine,
    ):
        """
        Initialize use case with dependencies.

        Args:
            project_repository: Repository for projects
            burn_verifier: Burn-proof verifier
            score_engine: Transparency score engine
        """
        self.project_repository = project_repository
        self.burn_verifier = burn_verifier
        self.score_engine = score_engine

    async def execute(
        self,
        project_id: str,
        transaction_ref: str,
        verification_code: str,
        verifying_wallet: Optional[str] = None,
    ) -> Project:
        """
        Verify project ownership.

        Args:
            project_id: Project to verify
            transaction_ref: Burn transaction signature
            verification_code: One-time code expected in the memo
            verifying_wallet: Authenticated wallet submitting the proof

        Returns:
            Updated Project

        Raises:
            EntityNotFoundError: If project does not exist
            ValidationError: If submitter is not the owner or input is empty
            BurnVerificationFailedError: If the burn proof is rejected
        """
        if not transaction_ref:
            raise ValidationError(field="transaction_ref", reason="required")
        if not verification_code:
            raise ValidationError(field="verification_code", reason="required")

        project = await self.project_repository.get_by_project_id(project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)

        if verifying_wallet is not None and verifying_wallet != project.owner_wallet:
            raise ValidationError(
                field="verifying_wallet",
                reason="only the project owner can verify ownership",
            )

        verified = await self.burn_verifier.verify_ownership_burn(
            transaction_ref,
            project.owner_wallet,
            verification_code,
        )
        if not verified:
            raise BurnVerificationFailedError(OWNERSHIP_REJECTED_MESSAGE)

        project = await self.project_repository.set_project_verified(
            project_id,
            project.owner_wallet,
            datetime.now(),
        )
        project.transparency_score = await self.score_engine.recompute_score(
            project_id
        )

        logger.info(
            "Project ownership verified",
            extra={"project_id": project_id, "tx_signature": transaction_ref},
        )
        return project
