"""
Burn verification API schemas.
"""

from pydantic import BaseModel, Field


class OwnershipVerificationRequest(BaseModel):
    """Check a project-ownership burn."""

    transaction_ref: str = Field(
        ..., min_length=1, description="Burn transaction signature (base58)"
    )
    expected_owner_wallet: str = Field(..., min_length=32, max_length=44)
    expected_memo_code: str = Field(
        ..., min_length=1, description="One-time code the memo must equal"
    )


class VoteVerificationRequest(BaseModel):
    """Check a vote burn."""

    transaction_ref: str = Field(..., min_length=1)
    expected_voter_wallet: str = Field(..., min_length=32, max_length=44)
    minimum_amount: int = Field(
        ..., ge=0, description="Minimum burned amount in base units"
    )


class VerificationResponse(BaseModel):
    """Verification outcome."""

    verified: bool
