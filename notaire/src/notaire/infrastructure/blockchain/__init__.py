"""
Solana ledger infrastructure.
"""

from notaire.infrastructure.blockchain.burn_decoder import decode_burn
from notaire.infrastructure.blockchain.instruction_scanner import (
    ScannedInstruction,
    find_instructions,
)
from notaire.infrastructure.blockchain.memo_decoder import decode_memo
from notaire.infrastructure.blockchain.signer_resolver import resolve_signer
from notaire.infrastructure.blockchain.solana_rpc_client import SolanaRpcClient
from notaire.infrastructure.blockchain.transaction_verifier import SolanaBurnVerifier

__all__ = [
    "ScannedInstruction",
    "SolanaBurnVerifier",
    "SolanaRpcClient",
    "decode_burn",
    "decode_memo",
    "find_instructions",
    "resolve_signer",
]
