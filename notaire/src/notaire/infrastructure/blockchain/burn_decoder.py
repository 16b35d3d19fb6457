"""
SPL Token burn decoder.

Understands the compiled ``Burn`` layout (discriminant 8 followed by a
little-endian u64 amount, mint at account position 1) and the ``jsonParsed``
rendering ``{"type": "burn", "info": {...}}``. Mint comparison is left to
the verifier; malformed input yields ``found=False`` instead of raising.
"""

from typing import Any, Optional, Sequence

import base58

from notaire.domain.entities.ledger_transaction import (
    CompiledInstruction,
    ParsedInstruction,
)
from notaire.domain.value_objects.findings import BurnFinding
from notaire.infrastructure.blockchain.constants import (
    BURN_DATA_LENGTH,
    BURN_DISCRIMINANT,
    BURN_MINT_ACCOUNT_POSITION,
    PARSED_BURN_TYPE,
    U64_MAX,
)
from notaire.infrastructure.blockchain.instruction_scanner import ScannedInstruction


def burn_amount_from_data(data: bytes) -> Optional[int]:
    """
    Decode the amount of a raw ``Burn`` instruction.

    Args:
        data: Instruction data bytes

    Returns:
        Amount in base units, or None if ``data`` is not a burn
    """
    if len(data) < BURN_DATA_LENGTH or data[0] != BURN_DISCRIMINANT:
        return None
    return int.from_bytes(data[1:BURN_DATA_LENGTH], "little")


def _to_amount(value: Any) -> Optional[int]:
    """Parse a parsed-JSON amount (string or int) into a u64."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str) and value.isdigit():
        amount = int(value)
    else:
        return None
    return amount if 0 <= amount <= U64_MAX else None


def _decode_compiled(
    scanned: ScannedInstruction,
    account_keys: Sequence[str],
) -> BurnFinding:
    ix = scanned.instruction
    amount = burn_amount_from_data(ix.data)
    if amount is None:
        return BurnFinding.none()

    mint = None
    if len(ix.accounts) > BURN_MINT_ACCOUNT_POSITION:
        index = ix.accounts[BURN_MINT_ACCOUNT_POSITION]
        if 0 <= index < len(account_keys):
            mint = account_keys[index]

    return BurnFinding(found=True, amount=amount, mint=mint, source=scanned.source)


def _decode_parsed(scanned: ScannedInstruction) -> BurnFinding:
    ix = scanned.instruction
    parsed = ix.parsed

    # Partially decoded: raw base58 data with account addresses
    if parsed is None:
        if not isinstance(ix.data, str):
            return BurnFinding.none()
        try:
            data = base58.b58decode(ix.data)
        except ValueError:
            return BurnFinding.none()
        amount = burn_amount_from_data(data)
        if amount is None:
            return BurnFinding.none()
        mint = None
        if len(ix.accounts) > BURN_MINT_ACCOUNT_POSITION:
            mint = ix.accounts[BURN_MINT_ACCOUNT_POSITION]
        return BurnFinding(found=True, amount=amount, mint=mint, source=scanned.source)

    if not isinstance(parsed, dict) or parsed.get("type") != PARSED_BURN_TYPE:
        return BurnFinding.none()

    info = parsed.get("info")
    if not isinstance(info, dict):
        return BurnFinding.none()

    token_amount = info.get("tokenAmount")
    if not isinstance(token_amount, dict):
        token_amount = {}

    mint = info.get("mint") or token_amount.get("mint")
    amount = _to_amount(token_amount.get("amount"))
    if amount is None:
        amount = _to_amount(info.get("amount"))
    if amount is None:
        return BurnFinding.none()

    return BurnFinding(
        found=True,
        amount=amount,
        mint=mint if isinstance(mint, str) else None,
        source=scanned.source,
    )


def decode_burn(
    scanned: ScannedInstruction,
    account_keys: Sequence[str],
) -> BurnFinding:
    """
    Decode a token-program instruction into a burn finding.

    Args:
        scanned: Token-program instruction from the scanner
        account_keys: Resolved account keys of the transaction, used for
            compiled instructions

    Returns:
        BurnFinding (``found=False`` when the instruction is not a burn)
    """
    if isinstance(scanned.instruction, CompiledInstruction):
        return _decode_compiled(scanned, account_keys)
    if isinstance(scanned.instruction, ParsedInstruction):
        return _decode_parsed(scanned)
    return BurnFinding.none()
