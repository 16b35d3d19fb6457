"""
Domain value objects package.
"""

from notaire.domain.value_objects.findings import (
    BurnFinding,
    MemoFinding,
    VerificationChallenge,
    VerificationFailure,
    VerificationResult,
)
from notaire.domain.value_objects.wallet_address import WalletAddress

__all__ = [
    "BurnFinding",
    "MemoFinding",
    "VerificationChallenge",
    "VerificationFailure",
    "VerificationResult",
    "WalletAddress",
]
