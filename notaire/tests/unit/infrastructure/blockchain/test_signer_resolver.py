"""
Unit tests for fee-payer resolution.

Usage:
    python -m tests.unit.infrastructure.blockchain.test_signer_resolver
    laborant notaire --unit
"""

from notaire.domain.entities.ledger_transaction import (
    AccountKey,
    ConfirmedTransaction,
)
from notaire.infrastructure.blockchain.signer_resolver import resolve_signer
from shared.tests import LaborantTest
from tests.helpers.keys import ALICE_WALLET, BOB_WALLET
from tests.helpers.transactions import TX_SIGNATURE, compiled_burn_tx, parsed_burn_tx


class TestSignerResolver(LaborantTest):
    """Unit tests for resolve_signer."""

    component_name = "notaire"
    test_category = "unit"

    def test_static_keys_position_zero(self):
        self.reporter.info("Testing signer from static keys", context="Test")

        tx = compiled_burn_tx(ALICE_WALLET, 1_000)

        assert resolve_signer(tx) == ALICE_WALLET

    def test_parsed_keys_position_zero(self):
        self.reporter.info("Testing signer from parsed keys", context="Test")

        tx = parsed_burn_tx(BOB_WALLET, 1_000)

        assert resolve_signer(tx) == BOB_WALLET

    def test_static_keys_win_over_parsed_keys(self):
        """Test static keys are consulted before the object list."""
        tx = ConfirmedTransaction(
            signature=TX_SIGNATURE,
            static_account_keys=(ALICE_WALLET,),
            account_keys=(AccountKey(pubkey=BOB_WALLET, signer=True),),
        )

        assert resolve_signer(tx) == ALICE_WALLET

    def test_signer_flag_is_not_consulted(self):
        """Test position zero wins even when another key is flagged signer."""
        tx = ConfirmedTransaction(
            signature=TX_SIGNATURE,
            account_keys=(
                AccountKey(pubkey=ALICE_WALLET, signer=False),
                AccountKey(pubkey=BOB_WALLET, signer=True),
            ),
        )

        assert resolve_signer(tx) == ALICE_WALLET

    def test_no_keys(self):
        """Test None when no representation has a key."""
        self.reporter.info("Testing transaction without keys", context="Test")

        tx = ConfirmedTransaction(signature=TX_SIGNATURE)

        assert resolve_signer(tx) is None


if __name__ == "__main__":
    TestSignerResolver.run_as_main()
