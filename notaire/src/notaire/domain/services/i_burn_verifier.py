"""
Burn verifier service interface.
"""

from abc import ABC, abstractmethod

from notaire.domain.value_objects.findings import VerificationResult


class IBurnVerifier(ABC):
    """
    Verifies that a confirmed transaction burns the configured token.

    ``check_*`` return the full VerificationResult for auditing;
    ``verify_*`` reduce it to a boolean.
    """

    @abstractmethod
    async def check_ownership_burn(
        self,
        tx_signature: str,
        expected_wallet: str,
        expected_memo: str,
    ) -> VerificationResult:
        """
        Check a project-ownership burn.

        Args:
            tx_signature: Transaction to inspect
            expected_wallet: Wallet that must have signed and paid
            expected_memo: One-time verification code the memo must equal

        Returns:
            VerificationResult
        """

    @abstractmethod
    async def check_vote_burn(
        self,
        tx_signature: str,
        expected_wallet: str,
        expected_min_amount: int,
    ) -> VerificationResult:
        """
        Check a vote burn.

        Args:
            tx_signature: Transaction to inspect
            expected_wallet: Voter wallet
            expected_min_amount: Minimum burned amount in base units

        Returns:
            VerificationResult
        """

    async def verify_ownership_burn(
        self,
        tx_signature: str,
        expected_wallet: str,
        expected_memo: str,
    ) -> bool:
        result = await self.check_ownership_burn(
            tx_signature, expected_wallet, expected_memo
        )
        return result.verified

    async def verify_vote_burn(
        self,
        tx_signature: str,
        expected_wallet: str,
        expected_min_amount: int,
    ) -> bool:
        result = await self.check_vote_burn(
            tx_signature, expected_wallet, expected_min_amount
        )
        return result.verified
