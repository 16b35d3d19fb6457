"""
Unit tests for DIContainer wiring.

Usage:
    python -m tests.unit.di.test_container
    laborant notaire --unit
"""

from unittest.mock import AsyncMock

from notaire.application.use_cases.cast_vote import CastVote
from notaire.config.settings import reset_settings
from notaire.di.container import DIContainer
from notaire.infrastructure.auth.solana_wallet_adapter import SolanaWalletAdapter
from notaire.infrastructure.blockchain.solana_rpc_client import SolanaRpcClient
from notaire.infrastructure.blockchain.transaction_verifier import (
    SolanaBurnVerifier,
)
from shared.tests import LaborantTest
from tests.helpers.fakes import FixedScoreEngine, InMemoryVoteRepository
from tests.helpers.keys import BURN_MINT
from tests.helpers.settings import use_test_settings


class TestDIContainer(LaborantTest):
    """Unit tests for DIContainer."""

    component_name = "notaire"
    test_category = "unit"

    def setup_test(self):
        self.settings = use_test_settings(
            VOTE_BURN_AMOUNT=25, LEDGER_RPC_MAX_RETRIES=5
        )
        self.container = DIContainer()

    def teardown_test(self):
        reset_settings()

    def test_burn_verifier_from_settings(self):
        self.reporter.info("Testing burn verifier wiring", context="Test")

        verifier = self.container.burn_verifier

        assert isinstance(verifier, SolanaBurnVerifier)
        assert verifier.burn_mint == BURN_MINT
        assert verifier.vote_burn_amount == 25
        assert verifier.ownership_burn_amount == self.settings.OWNERSHIP_BURN_AMOUNT
        assert verifier.fetch_timeout == self.settings.LEDGER_FETCH_TIMEOUT
        assert verifier.ledger_client is self.container.ledger_client
        assert self.container.burn_verifier is verifier

    def test_ledger_client_from_settings(self):
        client = self.container.ledger_client

        assert isinstance(client, SolanaRpcClient)
        assert client.rpc_url == self.settings.SOLANA_RPC_URL
        assert client.commitment == "confirmed"
        assert client.max_retries == 5

    def test_wallet_authenticator(self):
        assert isinstance(self.container.wallet_authenticator, SolanaWalletAdapter)

    def test_cast_vote_threshold(self):
        """Test votes use the configured vote burn amount."""
        use_case = self.container.get_cast_vote(
            InMemoryVoteRepository(), FixedScoreEngine()
        )

        assert isinstance(use_case, CastVote)
        assert use_case.vote_burn_amount == 25

    async def test_lifecycle(self):
        """Test initialize connects and shutdown releases resources."""
        self.reporter.info("Testing container lifecycle", context="Test")

        database = AsyncMock()
        ledger_client = AsyncMock()
        self.container._database = database
        self.container._ledger_client = ledger_client

        await self.container.initialize()
        database.connect.assert_awaited_once()
        database.create_tables.assert_awaited_once()

        await self.container.shutdown()
        database.disconnect.assert_awaited_once()
        ledger_client.close.assert_awaited_once()

    async def test_table_bootstrap_can_be_disabled(self):
        use_test_settings(DATABASE_CREATE_TABLES=False)
        database = AsyncMock()
        self.container._database = database

        await self.container.initialize()

        database.connect.assert_awaited_once()
        database.create_tables.assert_not_awaited()


if __name__ == "__main__":
    TestDIContainer.run_as_main()
