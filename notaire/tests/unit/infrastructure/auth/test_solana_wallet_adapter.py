"""
Unit tests for SolanaWalletAdapter.

Signatures are produced with deterministic PyNaCl keypairs.

Usage:
    python -m tests.unit.infrastructure.auth.test_solana_wallet_adapter
    laborant notaire --unit
"""

from notaire.domain.exceptions import InvalidSignatureEncodingError
from notaire.infrastructure.auth.solana_wallet_adapter import (
    SIGNED_MESSAGE_PREFIX,
    MessageEncoding,
    SolanaWalletAdapter,
    build_signed_message,
    decode_signature,
    encode_compact_length,
)
from shared.tests import LaborantTest
from tests.helpers.keys import (
    ALICE,
    ALICE_WALLET,
    BOB_WALLET,
    b58,
    sign_envelope,
    sign_raw,
)

MESSAGE = "Sign this message to authenticate with Notaire.\n\nNonce: abc"


class TestSolanaWalletAdapter(LaborantTest):
    """Unit tests for SolanaWalletAdapter."""

    component_name = "notaire"
    test_category = "unit"

    def setup_test(self):
        self.adapter = SolanaWalletAdapter()

    # ================================================================
    # Signature verification
    # ================================================================

    async def test_raw_signature_base58(self):
        self.reporter.info("Testing raw message signature", context="Test")

        signature = b58(sign_raw(ALICE, MESSAGE))

        assert await self.adapter.verify_signature(ALICE_WALLET, MESSAGE, signature)

    async def test_envelope_signature(self):
        """Test signatures over the signed-message envelope."""
        self.reporter.info("Testing envelope signature", context="Test")

        signature = b58(sign_envelope(ALICE, MESSAGE))

        assert await self.adapter.verify_signature(ALICE_WALLET, MESSAGE, signature)

    async def test_raw_bytes_signature(self):
        signature = sign_raw(ALICE, MESSAGE)

        assert await self.adapter.verify_signature(ALICE_WALLET, MESSAGE, signature)

    async def test_hex_signature(self):
        """Test hex signatures with and without the 0x prefix."""
        self.reporter.info("Testing hex signature", context="Test")

        # Plain hex only reaches the hex branch when it is not valid base58
        for i in range(20):
            message = f"{MESSAGE}-{i}"
            hex_signature = sign_raw(ALICE, message).hex()
            if "0" in hex_signature:
                break

        assert await self.adapter.verify_signature(
            ALICE_WALLET, message, hex_signature
        )
        assert await self.adapter.verify_signature(
            ALICE_WALLET, message, "0x" + hex_signature
        )

    async def test_wrong_wallet(self):
        signature = b58(sign_raw(ALICE, MESSAGE))

        assert not await self.adapter.verify_signature(BOB_WALLET, MESSAGE, signature)

    async def test_tampered_message(self):
        signature = b58(sign_raw(ALICE, MESSAGE))

        assert not await self.adapter.verify_signature(
            ALICE_WALLET, MESSAGE + " ", signature
        )

    async def test_wrong_signature_length(self):
        """Test 63 and 65 byte signatures are rejected."""
        self.reporter.info("Testing signature length", context="Test")

        signature = sign_raw(ALICE, MESSAGE)

        for bad in (signature[:63], signature + b"\x00"):
            assert not await self.adapter.verify_signature(
                ALICE_WALLET, MESSAGE, b58(bad)
            )
            assert not await self.adapter.verify_signature(ALICE_WALLET, MESSAGE, bad)

    async def test_undecodable_signature(self):
        assert not await self.adapter.verify_signature(
            ALICE_WALLET, MESSAGE, "not a signature!"
        )

    async def test_invalid_wallet_address(self):
        signature = b58(sign_raw(ALICE, MESSAGE))

        assert not await self.adapter.verify_signature("0OIl", MESSAGE, signature)
        assert not await self.adapter.verify_signature(
            b58(b"\x01" * 31), MESSAGE, signature
        )

    async def test_raw_only_adapter(self):
        """Test restricting encodings never accepts more than the default."""
        raw_only = SolanaWalletAdapter(encodings=(MessageEncoding.RAW,))

        assert await raw_only.verify_signature(
            ALICE_WALLET, MESSAGE, b58(sign_raw(ALICE, MESSAGE))
        )
        assert not await raw_only.verify_signature(
            ALICE_WALLET, MESSAGE, b58(sign_envelope(ALICE, MESSAGE))
        )

    # ================================================================
    # Encoding helpers
    # ================================================================

    def test_compact_length(self):
        self.reporter.info("Testing compact-u16 lengths", context="Test")

        assert encode_compact_length(0) == b"\x00"
        assert encode_compact_length(127) == b"\x7f"
        assert encode_compact_length(128) == b"\x80\x01"
        assert encode_compact_length(300) == b"\xac\x02"
        assert encode_compact_length(16384) == b"\x80\x80\x01"

    def test_compact_length_negative(self):
        try:
            encode_compact_length(-1)
            assert False, "Should have raised ValueError"
        except ValueError:
            pass

    def test_signed_message_layout(self):
        """Test prefix, compact length, then the message bytes."""
        envelope = build_signed_message(b"hi")

        assert SIGNED_MESSAGE_PREFIX == b"\xc3\xbfSolana Signed Message:\n"
        assert envelope == SIGNED_MESSAGE_PREFIX + b"\x02hi"

    def test_decode_signature_length(self):
        try:
            decode_signature(b"\x01" * 63)
            assert False, "Should have raised InvalidSignatureEncodingError"
        except InvalidSignatureEncodingError as e:
            assert "63" in e.message


if __name__ == "__main__":
    TestSolanaWalletAdapter.run_as_main()
