"""
Burn verification exceptions.

One class per failure reason of the transaction verifier. They are raised
inside the verification pipeline and folded into a VerificationResult at its
boundary, so callers only ever see a boolean plus an operator-facing reason.
"""

from notaire.domain.exceptions.base import NotaireException


class BurnVerificationError(NotaireException):
    """Base exception for burn-transaction verification failures."""

    def __init__(self, message: str, code: str, tx_signature: str | None = None):
        """
        Initialize verification error.

        Args:
            message: Operator-facing description
            code: Stable failure code (matches VerificationFailure)
            tx_signature: Transaction being verified
        """
        super().__init__(message, code=code)
        self.tx_signature = tx_signature


class TransactionNotFoundError(BurnVerificationError):
    """Raised when the ledger does not know the transaction (or timed out)."""

    def __init__(self, tx_signature: str, reason: str = "not found"):
        super().__init__(
            f"Transaction {reason}: {tx_signature}",
            code="NOT_FOUND",
            tx_signature=tx_signature,
        )


class TransactionExecutionFailedError(BurnVerificationError):
    """Raised when the transaction is confirmed but reverted."""

    def __init__(self, tx_signature: str, error: object):
        super().__init__(
            f"Transaction failed: {error}",
            code="EXECUTION_FAILED",
            tx_signature=tx_signature,
        )
        self.error = error


class AccountKeysUnavailableError(BurnVerificationError):
    """Raised when no account-key representation yields a signer."""

    def __init__(self, tx_signature: str):
        super().__init__(
            "Unable to extract signer address from transaction",
            code="ACCOUNT_KEYS_UNAVAILABLE",
            tx_signature=tx_signature,
        )


class SignerMismatchError(BurnVerificationError):
    """Raised when the fee payer is not the expected wallet."""

    def __init__(self, tx_signature: str, expected: str, actual: str):
        super().__init__(
            f"Signer mismatch: expected {expected}, got {actual}",
            code="SIGNER_MISMATCH",
            tx_signature=tx_signature,
        )
        self.expected = expected
        self.actual = actual


class MintMismatchError(BurnVerificationError):
    """Raised when no burn instruction targets the configured mint."""

    def __init__(self, tx_signature: str, expected_mint: str, seen_mints: list):
        super().__init__(
            f"Token burn for mint {expected_mint} not found "
            f"(burned mints seen: {seen_mints or 'none'})",
            code="MINT_MISMATCH",
            tx_signature=tx_signature,
        )
        self.expected_mint = expected_mint
        self.seen_mints = seen_mints


class InsufficientBurnAmountError(BurnVerificationError):
    """Raised when the burned amount is below the required threshold."""

    def __init__(self, tx_signature: str, required: int, burned: int):
        super().__init__(
            f"Insufficient burn amount: expected at least {required}, "
            f"got {burned}",
            code="INSUFFICIENT_AMOUNT",
            tx_signature=tx_signature,
        )
        self.required = required
        self.burned = burned


class MemoMissingError(BurnVerificationError):
    """Raised when the transaction carries no decodable memo."""

    def __init__(self, tx_signature: str):
        super().__init__(
            "Memo with verification code not found in transaction",
            code="MEMO_MISSING",
            tx_signature=tx_signature,
        )


class MemoMismatchError(BurnVerificationError):
    """Raised when memos exist but none equals the expected code."""

    def __init__(self, tx_signature: str, expected: str, found: list):
        super().__init__(
            f"Memo mismatch: expected {expected!r}, found {found!r}",
            code="MEMO_MISMATCH",
            tx_signature=tx_signature,
        )
        self.expected = expected
        self.found = found


class BurnVerificationFailedError(NotaireException):
    """
    Raised by privileged-write use cases when a burn proof is rejected.

    Carries only the public, user-facing message; the specific reason is
    in the operator logs.
    """

    def __init__(self, message: str):
        super().__init__(message, code="VERIFICATION_FAILED")
