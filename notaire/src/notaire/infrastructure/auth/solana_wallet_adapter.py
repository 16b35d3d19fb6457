"""
Solana wallet authentication adapter.

Implements wallet signature verification using Ed25519. Wallets differ in
what they actually sign, so a signature is checked against an ordered tuple
of message encodings: the raw UTF-8 message first, then the off-chain
"signed message" envelope.
"""

from enum import Enum
from typing import Sequence, Tuple, Union

import base58
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from notaire.domain.exceptions.auth import InvalidSignatureEncodingError
from notaire.domain.services.i_wallet_authenticator import IWalletAuthenticator
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

SIGNATURE_LENGTH = 64
PUBLIC_KEY_LENGTH = 32

# "\xff" is U+00FF, so the UTF-8 prefix starts with b"\xc3\xbf"
SIGNED_MESSAGE_PREFIX = "\xffSolana Signed Message:\n".encode("utf-8")


class MessageEncoding(str, Enum):
    """Byte layouts a wallet may have signed for a text message."""

    RAW = "raw"
    SIGNED_MESSAGE_ENVELOPE = "signed_message_envelope"


DEFAULT_ENCODINGS: Tuple[MessageEncoding, ...] = (
    MessageEncoding.RAW,
    MessageEncoding.SIGNED_MESSAGE_ENVELOPE,
)


def encode_compact_length(length: int) -> bytes:
    """
    Encode a length as compact-u16.

    7 bits per byte, least significant group first, high bit set on every
    byte but the last.

    Args:
        length: Non-negative length

    Returns:
        Encoded bytes (at least one)
    """
    if length < 0:
        raise ValueError(f"Length must be non-negative: {length}")

    out = bytearray()
    while True:
        byte = length & 0x7F
        length >>= 7
        if length:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def build_signed_message(message: bytes) -> bytes:
    """Wrap message bytes in the signed-message envelope."""
    return SIGNED_MESSAGE_PREFIX + encode_compact_length(len(message)) + message


def encode_message(message: str, encoding: MessageEncoding) -> bytes:
    """Render ``message`` in one of the supported encodings."""
    raw = message.encode("utf-8")
    if encoding is MessageEncoding.SIGNED_MESSAGE_ENVELOPE:
        return build_signed_message(raw)
    return raw


def decode_signature(signature: Union[str, bytes]) -> bytes:
    """
    Decode a signature to raw bytes.

    Strings are base58-decoded, falling back to hex (optional ``0x``) only
    if base58 decoding fails. Bytes are accepted as-is.

    Args:
        signature: base58 or hex string, or raw bytes

    Returns:
        64 signature bytes

    Raises:
        ValueError: If the string is neither base58 nor hex
        InvalidSignatureEncodingError: If the decoded length is not 64
    """
    if isinstance(signature, (bytes, bytearray)):
        signature_bytes = bytes(signature)
    else:
        try:
            signature_bytes = base58.b58decode(signature)
        except ValueError:
            hex_text = signature[2:] if signature.startswith("0x") else signature
            signature_bytes = bytes.fromhex(hex_text)

    if len(signature_bytes) != SIGNATURE_LENGTH:
        raise InvalidSignatureEncodingError(len(signature_bytes))
    return signature_bytes


class SolanaWalletAdapter(IWalletAuthenticator):
    """
    Solana wallet authentication using Ed25519 signatures.

    Verifies wallet ownership via signature verification.
    """

    def __init__(self, encodings: Sequence[MessageEncoding] = DEFAULT_ENCODINGS):
        """
        Initialize adapter.

        Args:
            encodings: Message encodings to try, in order
        """
        self.encodings = tuple(encodings)

    async def verify_signature(
        self,
        wallet_address: str,
        message: str,
        signature: Union[str, bytes],
    ) -> bool:
        """
        Verify Solana wallet signature.

        Args:
            wallet_address: Solana wallet address (base58)
            message: Original message that was signed
            signature: Signature (base58 or hex string, or raw bytes)

        Returns:
            True if the signature is valid under any configured encoding
        """
        try:
            signature_bytes = decode_signature(signature)
        except InvalidSignatureEncodingError as e:
            logger.warning(e.message, extra={"wallet_address": wallet_address})
            return False
        except ValueError:
            logger.warning(
                "Signature is neither base58 nor hex",
                extra={"wallet_address": wallet_address},
            )
            return False

        try:
            public_key_bytes = base58.b58decode(wallet_address)
        except ValueError:
            return False
        if len(public_key_bytes) != PUBLIC_KEY_LENGTH:
            return False
        verify_key = VerifyKey(public_key_bytes)

        for encoding in self.encodings:
            try:
                verify_key.verify(encode_message(message, encoding), signature_bytes)
            except BadSignatureError:
                continue
            logger.debug(
                "Wallet signature verified",
                extra={"wallet_address": wallet_address, "encoding": encoding.value},
            )
            return True

        logger.warning(
            "Signature verification failed under every message encoding",
            extra={
                "wallet_address": wallet_address,
                "message_length": len(message),
                "encodings": [e.value for e in self.encodings],
            },
        )
        return False
