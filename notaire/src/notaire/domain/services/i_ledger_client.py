"""
Ledger client interface.

Read-only access to confirmed transactions on the Solana ledger.
"""

from abc import ABC, abstractmethod
from typing import Optional

from notaire.domain.entities.ledger_transaction import ConfirmedTransaction


class ILedgerClient(ABC):
    """
    Abstract interface for fetching confirmed transactions.

    Implementations query a JSON-RPC node; tests inject in-memory fakes.
    """

    @abstractmethod
    async def get_confirmed_transaction(
        self,
        tx_signature: str,
    ) -> Optional[ConfirmedTransaction]:
        """
        Fetch a transaction at ``confirmed`` commitment.

        Args:
            tx_signature: Base58 transaction signature

        Returns:
            ConfirmedTransaction, or None if the ledger does not know it

        Raises:
            LedgerClientError: If the node cannot be reached or answers
                with an error
        """

    async def close(self) -> None:
        """Release transport resources (no-op by default)."""
