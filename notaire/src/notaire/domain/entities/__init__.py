"""
Domain entities package.
"""

from notaire.domain.entities.ledger_transaction import (
    AccountKey,
    CompiledInstruction,
    ConfirmedTransaction,
    InnerInstructionGroup,
    Instruction,
    InstructionSource,
    ParsedInstruction,
)
from notaire.domain.entities.project import Project
from notaire.domain.entities.vote import Vote, VoteType
from notaire.domain.entities.wallet_profile import WalletProfile

__all__ = [
    "AccountKey",
    "CompiledInstruction",
    "ConfirmedTransaction",
    "InnerInstructionGroup",
    "Instruction",
    "InstructionSource",
    "ParsedInstruction",
    "Project",
    "Vote",
    "VoteType",
    "WalletProfile",
]
