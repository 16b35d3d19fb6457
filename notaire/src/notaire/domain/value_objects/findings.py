"""
Verification findings - what the decoders saw and what the verifier decided.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from notaire.domain.entities.ledger_transaction import InstructionSource


class VerificationFailure(str, Enum):
    """Operator-facing reason a burn proof was rejected."""

    NOT_FOUND = "NOT_FOUND"
    EXECUTION_FAILED = "EXECUTION_FAILED"
    ACCOUNT_KEYS_UNAVAILABLE = "ACCOUNT_KEYS_UNAVAILABLE"
    SIGNER_MISMATCH = "SIGNER_MISMATCH"
    MINT_MISMATCH = "MINT_MISMATCH"
    INSUFFICIENT_AMOUNT = "INSUFFICIENT_AMOUNT"
    MEMO_MISSING = "MEMO_MISSING"
    MEMO_MISMATCH = "MEMO_MISMATCH"


@dataclass(frozen=True)
class BurnFinding:
    """Raw burn decoded from one instruction (mint not yet compared)."""

    found: bool
    amount: int = 0
    mint: Optional[str] = None
    source: Optional[InstructionSource] = None

    @classmethod
    def none(cls) -> "BurnFinding":
        return cls(found=False)


@dataclass(frozen=True)
class MemoFinding:
    """Memo text decoded from one instruction."""

    found: bool
    text: str = ""
    source: Optional[InstructionSource] = None

    @classmethod
    def none(cls) -> "MemoFinding":
        return cls(found=False)


@dataclass(frozen=True)
class VerificationChallenge:
    """
    What a burn transaction must prove, built per request.

    Attributes:
        expected_wallet: Wallet that must be the fee-paying signer
        min_amount: Minimum burned amount in base units (inclusive)
        mint: Token mint the burn must target
        expected_memo: Exact memo text, or None when no memo is required
    """

    expected_wallet: str
    min_amount: int
    mint: str
    expected_memo: Optional[str] = None


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of one burn verification.

    ``reason`` is None exactly when ``verified`` is True.
    """

    verified: bool
    reason: Optional[VerificationFailure] = None
    detail: str = ""
    signer: Optional[str] = None
    burn: Optional[BurnFinding] = None
    memo: Optional[MemoFinding] = None

    def __bool__(self) -> bool:
        return self.verified

    @classmethod
    def success(
        cls,
        signer: str,
        burn: BurnFinding,
        memo: Optional[MemoFinding] = None,
    ) -> "VerificationResult":
        return cls(verified=True, signer=signer, burn=burn, memo=memo)

    @classmethod
    def failure(
        cls,
        reason: VerificationFailure,
        detail: str,
        signer: Optional[str] = None,
        burn: Optional[BurnFinding] = None,
    ) -> "VerificationResult":
        return cls(
            verified=False,
            reason=reason,
            detail=detail,
            signer=signer,
            burn=burn,
        )
