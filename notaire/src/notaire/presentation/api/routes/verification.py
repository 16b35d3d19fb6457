"""
Burn verification API routes.

Expose the verifier as boolean checks; the rejection reason is only
logged for operators.
"""

from fastapi import APIRouter, Depends, status

from notaire.di.dependencies import get_burn_verifier
from notaire.domain.services.i_burn_verifier import IBurnVerifier
from notaire.presentation.schemas.verification_schemas import (
    OwnershipVerificationRequest,
    VerificationResponse,
    VoteVerificationRequest,
)

router = APIRouter(prefix="/verification", tags=["Verification"])


@router.post(
    "/ownership",
    response_model=VerificationResponse,
    status_code=status.HTTP_200_OK,
    summary="Check a project-ownership burn",
)
async def verify_ownership(
    request: OwnershipVerificationRequest,
    verifier: IBurnVerifier = Depends(get_burn_verifier),
) -> VerificationResponse:
    """Check that the burn was signed by the owner and carries the code."""
    verified = await verifier.verify_ownership_burn(
        request.transaction_ref,
        request.expected_owner_wallet,
        request.expected_memo_code,
    )
    return VerificationResponse(verified=verified)


@router.post(
    "/vote",
    response_model=VerificationResponse,
    status_code=status.HTTP_200_OK,
    summary="Check a vote burn",
)
async def verify_vote(
    request: VoteVerificationRequest,
    verifier: IBurnVerifier = Depends(get_burn_verifier),
) -> VerificationResponse:
    """Check that the burn was signed by the voter and meets the minimum."""
    verified = await verifier.verify_vote_burn(
        request.transaction_ref,
        request.expected_voter_wallet,
        request.minimum_amount,
    )
    return VerificationResponse(verified=verified)
