"""
Unit tests for GenerateAuthMessage use case.

Usage:
    python -m tests.unit.application.test_generate_auth_message
    laborant notaire --unit
"""

from notaire.application.use_cases.generate_auth_message import (
    GenerateAuthMessage,
)
from notaire.domain.exceptions import ValidationError
from shared.tests import LaborantTest
from tests.helpers.keys import ALICE_WALLET


class TestGenerateAuthMessage(LaborantTest):
    """Unit tests for GenerateAuthMessage."""

    component_name = "notaire"
    test_category = "unit"

    def setup_test(self):
        self.use_case = GenerateAuthMessage(app_name="Notaire")

    def test_message_content(self):
        self.reporter.info("Testing challenge text", context="Test")

        message = self.use_case.execute(ALICE_WALLET)

        assert message.startswith("Sign this message to authenticate with Notaire.")
        assert f"Wallet: {ALICE_WALLET}" in message
        assert "Nonce: " in message
        assert "Timestamp: " in message

    def test_nonce_changes(self):
        """Test every challenge carries a fresh nonce."""
        assert self.use_case.execute(ALICE_WALLET) != self.use_case.execute(
            ALICE_WALLET
        )

    def test_invalid_wallet(self):
        self.reporter.info("Testing invalid wallet", context="Test")

        try:
            self.use_case.execute("not-a-wallet")
            assert False, "Should have raised ValidationError"
        except ValidationError as e:
            assert "wallet_address" in e.message


if __name__ == "__main__":
    TestGenerateAuthMessage.run_as_main()
