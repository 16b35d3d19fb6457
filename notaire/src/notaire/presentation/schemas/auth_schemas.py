"""
Authentication API schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ================================================================
# Challenge Schemas
# ================================================================


class AuthMessageRequest(BaseModel):
    """Request for a sign-in challenge."""

    wallet_address: str = Field(
        ...,
        min_length=32,
        max_length=44,
        description="Solana wallet address",
    )


class AuthMessageResponse(BaseModel):
    """Challenge text to sign."""

    message: str = Field(..., description="Message the wallet must sign")


# ================================================================
# Authenticate Schemas
# ================================================================


class AuthenticateRequest(BaseModel):
    """Request to authenticate with a signed challenge."""

    wallet_address: str = Field(
        ...,
        min_length=32,
        max_length=44,
        description="Solana wallet address",
    )
    signature: str = Field(
        ..., min_length=1, description="Signature (base58 or hex encoded)"
    )
    message: str = Field(..., min_length=1, description="Message that was signed")


class WalletProfileResponse(BaseModel):
    """Wallet profile response."""

    model_config = ConfigDict(from_attributes=True)

    wallet_address: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AuthenticateResponse(BaseModel):
    """Session issued after successful authentication."""

    message: str = Field(default="Authentication successful")
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer")
    profile: WalletProfileResponse


# ================================================================
# Profile Schemas
# ================================================================


class UpdateProfileRequest(BaseModel):
    """
    Request to edit the current wallet profile.

    Omitted fields are left unchanged; null or an empty string clears one.
    """

    username: Optional[str] = Field(
        default=None, max_length=50, description="Unique username"
    )
    full_name: Optional[str] = Field(
        default=None, max_length=255, description="Display name"
    )
