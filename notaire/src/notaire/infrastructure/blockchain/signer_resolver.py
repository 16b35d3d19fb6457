"""
Fee-payer resolution for confirmed transactions.
"""

from typing import Optional

from notaire.domain.entities.ledger_transaction import ConfirmedTransaction


def resolve_signer(tx: ConfirmedTransaction) -> Optional[str]:
    """
    Return the fee-paying signer (account-key position zero).

    Representations are tried in order: versioned static account keys,
    then the legacy/parsed ``{pubkey, signer, writable}`` list. Per-instruction
    signer flags are never consulted.

    Args:
        tx: Confirmed transaction

    Returns:
        Signer address, or None when no representation has a key at index 0
    """
    if tx.static_account_keys:
        return tx.static_account_keys[0]

    if tx.account_keys and tx.account_keys[0].pubkey:
        return tx.account_keys[0].pubkey

    return None
