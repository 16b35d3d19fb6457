"""
Lazy instruction scanner.

Walks a transaction's instructions for one program in a fixed priority
order: compiled top-level, parsed top-level, then inner instructions. Each
tier is exhausted before the next one starts, and callers may stop early.
"""

from dataclasses import dataclass
from typing import Iterator

from notaire.domain.entities.ledger_transaction import (
    CompiledInstruction,
    ConfirmedTransaction,
    Instruction,
    InstructionSource,
    ParsedInstruction,
)


@dataclass(frozen=True)
class ScannedInstruction:
    """Instruction matched by the scanner, tagged with where it was found."""

    source: InstructionSource
    instruction: Instruction


def _targets(tx: ConfirmedTransaction, ix: Instruction, program_id: str) -> bool:
    if isinstance(ix, CompiledInstruction):
        return tx.account_at(ix.program_id_index) == program_id
    return ix.program_id == program_id


def find_instructions(
    tx: ConfirmedTransaction,
    target_program: str,
) -> Iterator[ScannedInstruction]:
    """
    Yield every instruction of ``tx`` that invokes ``target_program``.

    Args:
        tx: Confirmed transaction
        target_program: Program address to match

    Yields:
        ScannedInstruction in priority order
    """
    for ix in tx.instructions:
        if isinstance(ix, CompiledInstruction) and _targets(tx, ix, target_program):
            yield ScannedInstruction(InstructionSource.COMPILED, ix)

    for ix in tx.instructions:
        if isinstance(ix, ParsedInstruction) and ix.program_id == target_program:
            yield ScannedInstruction(InstructionSource.PARSED, ix)

    for group in tx.inner_instructions:
        for ix in group.instructions:
            if _targets(tx, ix, target_program):
                yield ScannedInstruction(InstructionSource.INNER, ix)
