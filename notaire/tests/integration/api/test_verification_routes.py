"""
Integration tests for Verification and Health API routes.

The burn verifier runs against an in-memory ledger client.

Tests:
- POST /api/verification/ownership
- POST /api/verification/vote
- GET /health, GET /health/ready

Usage:
    python -m tests.integration.api.test_verification_routes
    laborant notaire --integration
"""

import httpx

from notaire.config.settings import reset_settings
from notaire.di.container import get_container, reset_container
from notaire.di.dependencies import get_burn_verifier
from notaire.domain.exceptions import LedgerClientError
from notaire.infrastructure.blockchain.transaction_verifier import (
    SolanaBurnVerifier,
)
from notaire.main import create_app
from shared.tests import LaborantTest
from tests.helpers.fakes import FakeLedgerClient
from tests.helpers.keys import ALICE_WALLET, BOB_WALLET, BURN_MINT
from tests.helpers.settings import use_test_settings
from tests.helpers.transactions import TX_SIGNATURE, compiled_burn_tx

CODE = "abc123"


class _StubDatabase:
    def __init__(self, healthy: bool):
        self.healthy = healthy

    async def health_check(self) -> bool:
        return self.healthy


class TestVerificationRoutes(LaborantTest):
    """Integration tests for Verification API routes."""

    component_name = "notaire"
    test_category = "integration"

    def setup_test(self):
        settings = use_test_settings()
        reset_container()

        self.ledger = FakeLedgerClient()
        self.app = create_app(settings)
        self.app.dependency_overrides[get_burn_verifier] = lambda: SolanaBurnVerifier(
            ledger_client=self.ledger,
            burn_mint=BURN_MINT,
            ownership_burn_amount=settings.OWNERSHIP_BURN_AMOUNT,
            vote_burn_amount=settings.VOTE_BURN_AMOUNT,
        )

    def teardown_test(self):
        reset_container()
        reset_settings()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=self.app), base_url="http://test"
        )

    async def _ownership(self, owner: str = ALICE_WALLET, code: str = CODE):
        async with self._client() as client:
            return await client.post(
                "/api/verification/ownership",
                json={
                    "transaction_ref": TX_SIGNATURE,
                    "expected_owner_wallet": owner,
                    "expected_memo_code": code,
                },
            )

    async def _vote(self, voter: str = ALICE_WALLET, minimum: int = 10):
        async with self._client() as client:
            return await client.post(
                "/api/verification/vote",
                json={
                    "transaction_ref": TX_SIGNATURE,
                    "expected_voter_wallet": voter,
                    "minimum_amount": minimum,
                },
            )

    # ================================================================
    # Ownership
    # ================================================================

    async def test_ownership_verified(self):
        self.reporter.info("Testing POST /api/verification/ownership", context="Test")

        self.ledger.add(compiled_burn_tx(ALICE_WALLET, 500_000_000, memo=CODE))

        response = await self._ownership()

        assert response.status_code == 200
        assert response.json() == {"verified": True}

    async def test_ownership_wrong_signer(self):
        """Test rejections answer 200 with verified false and no reason."""
        self.reporter.info("Testing rejected ownership burn", context="Test")

        self.ledger.add(compiled_burn_tx(BOB_WALLET, 500_000_000, memo=CODE))

        response = await self._ownership()

        assert response.status_code == 200
        assert response.json() == {"verified": False}

    async def test_ownership_missing_fields(self):
        async with self._client() as client:
            response = await client.post(
                "/api/verification/ownership",
                json={"transaction_ref": TX_SIGNATURE},
            )

        assert response.status_code == 422

    # ================================================================
    # Vote
    # ================================================================

    async def test_vote_verified(self):
        self.reporter.info("Testing POST /api/verification/vote", context="Test")

        self.ledger.add(compiled_burn_tx(ALICE_WALLET, 10))

        response = await self._vote(minimum=10)

        assert response.json() == {"verified": True}

    async def test_vote_insufficient(self):
        self.ledger.add(compiled_burn_tx(ALICE_WALLET, 9))

        response = await self._vote(minimum=10)

        assert response.json() == {"verified": False}

    async def test_vote_negative_minimum(self):
        response = await self._vote(minimum=-1)

        assert response.status_code == 422

    async def test_ledger_outage_is_not_verified(self):
        """Test RPC failures surface as an unverified result."""
        self.ledger.error = LedgerClientError("node down", TX_SIGNATURE)

        response = await self._vote()

        assert response.status_code == 200
        assert response.json() == {"verified": False}

    # ================================================================
    # Health
    # ================================================================

    async def test_liveness(self):
        async with self._client() as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_request_id_header(self):
        """Test the caller's request ID is echoed and a missing one is generated."""
        async with self._client() as client:
            echoed = await client.get("/health", headers={"X-Request-ID": "req-42"})
            generated = await client.get("/health")

        assert echoed.headers["X-Request-ID"] == "req-42"
        assert len(generated.headers["X-Request-ID"]) == 36

    async def test_readiness(self):
        self.reporter.info("Testing GET /health/ready", context="Test")

        get_container()._database = _StubDatabase(healthy=True)

        async with self._client() as client:
            response = await client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["components"] == {
            "database": "healthy",
            "burn_mint": "configured",
        }

    async def test_readiness_database_down(self):
        get_container()._database = _StubDatabase(healthy=False)

        async with self._client() as client:
            response = await client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


if __name__ == "__main__":
    TestVerificationRoutes.run_as_main()
