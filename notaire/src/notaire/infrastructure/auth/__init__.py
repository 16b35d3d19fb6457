"""
Authentication infrastructure.
"""

from notaire.infrastructure.auth.jwt_handler import (
    Session,
    create_access_token,
    decode_access_token,
    extract_wallet_address,
)
from notaire.infrastructure.auth.solana_wallet_adapter import (
    MessageEncoding,
    SolanaWalletAdapter,
)

__all__ = [
    "MessageEncoding",
    "Session",
    "SolanaWalletAdapter",
    "create_access_token",
    "decode_access_token",
    "extract_wallet_address",
]
