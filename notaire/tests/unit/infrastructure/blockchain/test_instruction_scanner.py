"""
Unit tests for the instruction scanner.

Usage:
    python -m tests.unit.infrastructure.blockchain.test_instruction_scanner
    laborant notaire --unit
"""

from notaire.domain.entities.ledger_transaction import (
    CompiledInstruction,
    ConfirmedTransaction,
    InnerInstructionGroup,
    InstructionSource,
    ParsedInstruction,
)
from notaire.infrastructure.blockchain.constants import (
    MEMO_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from notaire.infrastructure.blockchain.instruction_scanner import find_instructions
from shared.tests import LaborantTest
from tests.helpers.keys import ALICE_WALLET, BURN_MINT, TOKEN_ACCOUNT
from tests.helpers.transactions import TX_SIGNATURE, burn_data


def _mixed_tx() -> ConfirmedTransaction:
    """Token instructions in every tier, declared inner-first."""
    return ConfirmedTransaction(
        signature=TX_SIGNATURE,
        static_account_keys=(
            ALICE_WALLET,
            TOKEN_ACCOUNT,
            BURN_MINT,
            TOKEN_PROGRAM_ID,
            MEMO_PROGRAM_ID,
        ),
        instructions=(
            ParsedInstruction(program_id=TOKEN_PROGRAM_ID, parsed={"type": "burn"}),
            CompiledInstruction(4, (0,), b"memo"),
            CompiledInstruction(3, (1, 2, 0), burn_data(1)),
        ),
        inner_instructions=(
            InnerInstructionGroup(
                index=0,
                instructions=(
                    CompiledInstruction(3, (1, 2, 0), burn_data(2)),
                    ParsedInstruction(program_id=MEMO_PROGRAM_ID, parsed="x"),
                ),
            ),
        ),
    )


class TestInstructionScanner(LaborantTest):
    """Unit tests for find_instructions."""

    component_name = "notaire"
    test_category = "unit"

    def test_tier_order(self):
        """Test compiled, then parsed, then inner instructions."""
        self.reporter.info("Testing scan priority", context="Test")

        found = list(find_instructions(_mixed_tx(), TOKEN_PROGRAM_ID))

        assert [s.source for s in found] == [
            InstructionSource.COMPILED,
            InstructionSource.PARSED,
            InstructionSource.INNER,
        ]
        assert found[0].instruction.data == burn_data(1)
        assert found[2].instruction.data == burn_data(2)

    def test_filters_by_program(self):
        found = list(find_instructions(_mixed_tx(), MEMO_PROGRAM_ID))

        assert [s.source for s in found] == [
            InstructionSource.COMPILED,
            InstructionSource.INNER,
        ]

    def test_unresolvable_program_index_is_skipped(self):
        """Test compiled instructions pointing past the key list never match."""
        tx = ConfirmedTransaction(
            signature=TX_SIGNATURE,
            static_account_keys=(ALICE_WALLET,),
            instructions=(CompiledInstruction(9, (), burn_data(1)),),
        )

        assert list(find_instructions(tx, TOKEN_PROGRAM_ID)) == []

    def test_is_lazy(self):
        """Test the caller can stop after the first match."""
        self.reporter.info("Testing early termination", context="Test")

        scanner = find_instructions(_mixed_tx(), TOKEN_PROGRAM_ID)
        first = next(scanner)

        assert first.source is InstructionSource.COMPILED
        scanner.close()

    def test_empty_transaction(self):
        tx = ConfirmedTransaction(signature=TX_SIGNATURE)

        assert list(find_instructions(tx, TOKEN_PROGRAM_ID)) == []


if __name__ == "__main__":
    TestInstructionScanner.run_as_main()
