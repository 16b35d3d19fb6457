"""
Solana burn-proof verifier.

Checks that an already-confirmed transaction burns at least a required
amount of the configured SPL token, was paid for by the expected wallet and,
for ownership proofs, carries the one-time verification code as a memo.
"""

import asyncio
from typing import List, Optional

from notaire.config.settings import (
    OWNERSHIP_BURN_AMOUNT,
    PLACEHOLDER_MINT,
    VOTE_BURN_AMOUNT,
)
from notaire.domain.entities.ledger_transaction import ConfirmedTransaction
from notaire.domain.exceptions.blockchain import LedgerClientError
from notaire.domain.exceptions.verification import (
    AccountKeysUnavailableError,
    BurnVerificationError,
    InsufficientBurnAmountError,
    MemoMismatchError,
    MemoMissingError,
    MintMismatchError,
    SignerMismatchError,
    TransactionExecutionFailedError,
    TransactionNotFoundError,
)
from notaire.domain.services.i_burn_verifier import IBurnVerifier
from notaire.domain.services.i_ledger_client import ILedgerClient
from notaire.domain.value_objects.findings import (
    BurnFinding,
    MemoFinding,
    VerificationChallenge,
    VerificationFailure,
    VerificationResult,
)
from notaire.infrastructure.blockchain.burn_decoder import decode_burn
from notaire.infrastructure.blockchain.constants import (
    MEMO_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from notaire.infrastructure.blockchain.instruction_scanner import find_instructions
from notaire.infrastructure.blockchain.memo_decoder import decode_memo
from notaire.infrastructure.blockchain.signer_resolver import resolve_signer
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class SolanaBurnVerifier(IBurnVerifier):
    """
    Stateless burn verifier over an injected ledger client.

    Holds only configuration, so one instance serves concurrent requests.
    Never retries: transport retries belong to the ledger client.
    """

    def __init__(
        self,
        ledger_client: ILedgerClient,
        burn_mint: str,
        ownership_burn_amount: int = OWNERSHIP_BURN_AMOUNT,
        vote_burn_amount: int = VOTE_BURN_AMOUNT,
        fetch_timeout: float = 15.0,
    ):
        """
        Initialize burn verifier.

        Args:
            ledger_client: Source of confirmed transactions
            burn_mint: SPL token mint every burn must target
            ownership_burn_amount: Minimum burn for ownership proofs
            vote_burn_amount: Default minimum burn for votes
            fetch_timeout: Upper bound for one fetch in seconds
        """
        self.ledger_client = ledger_client
        self.burn_mint = burn_mint
        self.ownership_burn_amount = ownership_burn_amount
        self.vote_burn_amount = vote_burn_amount
        self.fetch_timeout = fetch_timeout

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
            expected_wallet: Project owner wallet
            expected_memo: Verification code the memo must equal exactly

        Returns:
            VerificationResult
        """
        challenge = VerificationChallenge(
            expected_wallet=expected_wallet,
            min_amount=self.ownership_burn_amount,
            mint=self.burn_mint,
            expected_memo=expected_memo,
        )
        return await self.check(tx_signature, challenge)

    async def check_vote_burn(
        self,
        tx_signature: str,
        expected_wallet: str,
        expected_min_amount: Optional[int] = None,
    ) -> VerificationResult:
        """
        Check a vote burn.

        Args:
            tx_signature: Transaction to inspect
            expected_wallet: Voter wallet
            expected_min_amount: Minimum burn (defaults to vote_burn_amount)

        Returns:
            VerificationResult
        """
        if expected_min_amount is None:
            expected_min_amount = self.vote_burn_amount
        challenge = VerificationChallenge(
            expected_wallet=expected_wallet,
            min_amount=expected_min_amount,
            mint=self.burn_mint,
        )
        return await self.check(tx_signature, challenge)

    async def check(
        self,
        tx_signature: str,
        challenge: VerificationChallenge,
    ) -> VerificationResult:
        """
        Run the verification pipeline for one challenge.

        Failures are raised as BurnVerificationError subclasses inside the
        pipeline and converted here, so every rejection is logged with its
        specific reason.

        Args:
            tx_signature: Transaction to inspect
            challenge: What the transaction must prove

        Returns:
            VerificationResult
        """
        if challenge.mint == PLACEHOLDER_MINT:
            logger.error(
                "Burn token mint is not configured (placeholder mint in use); "
                "no burn proof can verify",
                extra={"tx_signature": tx_signature},
            )

        signer: Optional[str] = None
        burn: Optional[BurnFinding] = None
        try:
            tx = await self._fetch(tx_signature)

            signer = resolve_signer(tx)
            if signer is None:
                raise AccountKeysUnavailableError(tx_signature)
            if signer != challenge.expected_wallet:
                raise SignerMismatchError(
                    tx_signature, challenge.expected_wallet, signer
                )

            burn = self._find_burn(tx, challenge)
            if burn.amount < challenge.min_amount:
                raise InsufficientBurnAmountError(
                    tx_signature, challenge.min_amount, burn.amount
                )

            memo = None
            if challenge.expected_memo is not None:
                memo = self._find_memo(tx, challenge.expected_memo)

        except BurnVerificationError as e:
            logger.warning(
                f"Burn verification failed: {e.message}",
                extra={
                    "tx_signature": tx_signature,
                    "reason": e.code,
                    "expected_wallet": challenge.expected_wallet,
                },
            )
            return VerificationResult.failure(
                reason=VerificationFailure(e.code),
                detail=e.message,
                signer=signer,
                burn=burn,
            )

        logger.info(
            "Burn verified",
            extra={
                "tx_signature": tx_signature,
                "signer": signer,
                "amount": burn.amount,
                "burn_source": burn.source.value if burn.source else None,
            },
        )
        return VerificationResult.success(signer=signer, burn=burn, memo=memo)

    async def _fetch(self, tx_signature: str) -> ConfirmedTransaction:
        """Fetch under the timeout; transport failures map to NOT_FOUND."""
        try:
            tx = await asyncio.wait_for(
                self.ledger_client.get_confirmed_transaction(tx_signature),
                timeout=self.fetch_timeout,
            )
        except asyncio.TimeoutError:
            raise TransactionNotFoundError(
                tx_signature, reason=f"fetch timed out after {self.fetch_timeout}s"
            )
        except LedgerClientError as e:
            raise TransactionNotFoundError(
                tx_signature, reason=f"fetch failed ({e.message})"
            )
        except Exception as e:
            logger.error(
                f"Unexpected ledger client failure: {e!r}",
                extra={"tx_signature": tx_signature},
            )
            raise TransactionNotFoundError(
                tx_signature, reason=f"fetch failed ({type(e).__name__})"
            )

        if tx is None:
            raise TransactionNotFoundError(tx_signature)
        if not tx.has_meta:
            raise TransactionNotFoundError(tx_signature, reason="not confirmed")
        if not tx.succeeded:
            raise TransactionExecutionFailedError(tx_signature, tx.err)
        return tx

    def _find_burn(
        self,
        tx: ConfirmedTransaction,
        challenge: VerificationChallenge,
    ) -> BurnFinding:
        """First burn of the configured mint, in scanner priority order."""
        account_keys = tx.resolved_account_keys()
        seen_mints: List[Optional[str]] = []
        for scanned in find_instructions(tx, TOKEN_PROGRAM_ID):
            finding = decode_burn(scanned, account_keys)
            if not finding.found:
                continue
            if finding.mint == challenge.mint:
                return finding
            seen_mints.append(finding.mint)
        raise MintMismatchError(tx.signature, challenge.mint, seen_mints)

    def _find_memo(self, tx: ConfirmedTransaction, expected_memo: str) -> MemoFinding:
        """Memo equal to the expected code, byte for byte."""
        found: List[str] = []
        for scanned in find_instructions(tx, MEMO_PROGRAM_ID):
            finding = decode_memo(scanned)
            if not finding.found:
                continue
            if finding.text == expected_memo:
                return finding
            found.append(finding.text)
        if not found:
            raise MemoMissingError(tx.signature)
        raise MemoMismatchError(tx.signature, expected_memo, found)
