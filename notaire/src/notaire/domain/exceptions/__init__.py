"""
Domain exceptions package.
"""

# Auth exceptions
from notaire.domain.exceptions.auth import (
    AuthenticationError,
    ExpiredTokenError,
    InvalidSignatureEncodingError,
    InvalidSignatureError,
    InvalidTokenError,
)

# Base exceptions
from notaire.domain.exceptions.base import (
    DuplicateEntityError,
    EntityNotFoundError,
    NotaireException,
    ValidationError,
)

# Blockchain exceptions
from notaire.domain.exceptions.blockchain import BlockchainError, LedgerClientError

# Verification exceptions
from notaire.domain.exceptions.verification import (
    AccountKeysUnavailableError,
    BurnVerificationError,
    BurnVerificationFailedError,
    InsufficientBurnAmountError,
    MemoMismatchError,
    MemoMissingError,
    MintMismatchError,
    SignerMismatchError,
    TransactionExecutionFailedError,
    TransactionNotFoundError,
)

__all__ = [
    # Base
    "NotaireException",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ValidationError",
    # Auth
    "AuthenticationError",
    "InvalidSignatureError",
    "InvalidSignatureEncodingError",
    "InvalidTokenError",
    "ExpiredTokenError",
    # Blockchain
    "BlockchainError",
    "LedgerClientError",
    # Verification
    "BurnVerificationError",
    "BurnVerificationFailedError",
    "TransactionNotFoundError",
    "TransactionExecutionFailedError",
    "AccountKeysUnavailableError",
    "SignerMismatchError",
    "MintMismatchError",
    "InsufficientBurnAmountError",
    "MemoMissingError",
    "MemoMismatchError",
]
