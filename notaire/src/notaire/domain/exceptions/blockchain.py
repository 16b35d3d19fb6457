"""
Blockchain-related exceptions.

Transport-level failures of the ledger client, as opposed to the burn
verification failures in ``verification``.
"""

from notaire.domain.exceptions.base import NotaireException


class BlockchainError(NotaireException):
    """Base exception for ledger access."""


class LedgerClientError(BlockchainError):
    """Raised when the RPC node cannot be reached or returns an error."""

    def __init__(self, message: str, tx_signature: str | None = None):
        """
        Initialize ledger client error.

        Args:
            message: Error message
            tx_signature: Transaction being fetched
        """
        super().__init__(message, code="LEDGER_RPC_ERROR")
        self.tx_signature = tx_signature
