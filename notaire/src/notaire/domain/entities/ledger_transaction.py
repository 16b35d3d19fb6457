"""
Confirmed ledger transaction - Domain model for a fetched Solana transaction.

A transaction can reach us in two RPC encodings, and real transactions mix
them freely:

- ``json``: account keys are plain base58 strings (versioned "static" keys,
  with address-lookup-table keys in ``meta.loadedAddresses``) and every
  instruction is compiled (program index, account indexes, base58 data).
- ``jsonParsed``: account keys are ``{pubkey, signer, writable}`` objects and
  instructions of known programs come back parsed (``{"type", "info"}`` or a
  plain string for memos); unknown ones are partially decoded.

Both shapes are modelled as explicit variants instead of being flattened, so
decoders can tell which representation matched.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

import base58


class InstructionSource(str, Enum):
    """Where an instruction was found, in scan priority order."""

    COMPILED = "compiled"
    PARSED = "parsed"
    INNER = "inner"


@dataclass(frozen=True)
class CompiledInstruction:
    """Top-level or inner instruction referencing accounts by index."""

    program_id_index: int
    accounts: Tuple[int, ...] = ()
    data: bytes = b""


@dataclass(frozen=True)
class ParsedInstruction:
    """
    Instruction as rendered by the ``jsonParsed`` encoding.

    ``parsed`` is a dict for most programs, a string for the memo program,
    and None for partially decoded instructions (which carry base58 ``data``
    and account addresses instead).
    """

    program_id: str
    program: Optional[str] = None
    parsed: Any = None
    accounts: Tuple[str, ...] = ()
    data: Optional[str] = None


Instruction = Union[CompiledInstruction, ParsedInstruction]


@dataclass(frozen=True)
class InnerInstructionGroup:
    """Instructions emitted by programs while executing top-level ``index``."""

    index: int
    instructions: Tuple[Instruction, ...] = ()


@dataclass(frozen=True)
class AccountKey:
    """Account entry of the parsed (legacy object) account-key list."""

    pubkey: str
    signer: bool = False
    writable: bool = False


@dataclass(frozen=True)
class ConfirmedTransaction:
    """
    Immutable view of a confirmed transaction and its execution metadata.

    Fetched fresh per verification, never cached and never mutated.
    """

    signature: str
    err: Any = None
    static_account_keys: Optional[Tuple[str, ...]] = None
    account_keys: Tuple[AccountKey, ...] = ()
    loaded_writable: Tuple[str, ...] = ()
    loaded_readonly: Tuple[str, ...] = ()
    instructions: Tuple[Instruction, ...] = ()
    inner_instructions: Tuple[InnerInstructionGroup, ...] = ()
    slot: Optional[int] = None
    block_time: Optional[int] = None
    has_meta: bool = field(default=True, compare=False)

    @property
    def succeeded(self) -> bool:
        """True when the ledger executed the transaction without error."""
        return self.err is None

    def resolved_account_keys(self) -> List[str]:
        """
        Full account list that compiled instruction indexes point into.

        Static keys are followed by lookup-table keys (writable first, then
        readonly), matching the runtime's index layout. The parsed list
        already includes lookup-table keys.
        """
        if self.static_account_keys is not None:
            return [
                *self.static_account_keys,
                *self.loaded_writable,
                *self.loaded_readonly,
            ]
        return [key.pubkey for key in self.account_keys]

    def account_at(self, index: int) -> Optional[str]:
        """Resolve an account index, None when out of range."""
        keys = self.resolved_account_keys()
        if 0 <= index < len(keys):
            return keys[index]
        return None

    @classmethod
    def from_rpc(cls, signature: str, result: dict) -> "ConfirmedTransaction":
        """
        Build from a ``getTransaction`` RPC result (json or jsonParsed).

        Args:
            signature: Transaction signature that was requested
            result: The ``result`` member of the RPC response

        Returns:
            ConfirmedTransaction

        Raises:
            ValueError: If the payload is not a JSON-encoded transaction
        """
        transaction = result.get("transaction")
        if not isinstance(transaction, dict):
            raise ValueError("Transaction payload is not JSON encoded")

        message = transaction.get("message") or {}
        meta = result.get("meta")

        static_keys: Optional[Tuple[str, ...]] = None
        parsed_keys: List[AccountKey] = []
        raw_keys = message.get("accountKeys") or []
        if raw_keys and all(isinstance(k, str) for k in raw_keys):
            static_keys = tuple(raw_keys)
        else:
            for key in raw_keys:
                if isinstance(key, dict) and key.get("pubkey"):
                    parsed_keys.append(
                        AccountKey(
                            pubkey=key["pubkey"],
                            signer=bool(key.get("signer")),
                            writable=bool(key.get("writable")),
                        )
                    )

        loaded = (meta or {}).get("loadedAddresses") or {}

        inner_groups = tuple(
            InnerInstructionGroup(
                index=group.get("index", 0),
                instructions=tuple(
                    _instruction_from_rpc(ix) for ix in group.get("instructions", [])
                ),
            )
            for group in (meta or {}).get("innerInstructions") or []
        )

        return cls(
            signature=signature,
            err=(meta or {}).get("err"),
            static_account_keys=static_keys,
            account_keys=tuple(parsed_keys),
            loaded_writable=tuple(loaded.get("writable") or ()),
            loaded_readonly=tuple(loaded.get("readonly") or ()),
            instructions=tuple(
                _instruction_from_rpc(ix) for ix in message.get("instructions", [])
            ),
            inner_instructions=inner_groups,
            slot=result.get("slot"),
            block_time=result.get("blockTime"),
            has_meta=meta is not None,
        )


def _instruction_from_rpc(raw: dict) -> Instruction:
    """Map one RPC instruction object onto its variant."""
    if "programIdIndex" in raw:
        accounts = raw.get("accounts", raw.get("accountKeyIndexes", []))
        data = raw.get("data") or b""
        if isinstance(data, str):
            data = base58.b58decode(data)
        return CompiledInstruction(
            program_id_index=int(raw["programIdIndex"]),
            accounts=tuple(int(a) for a in accounts),
            data=bytes(data),
        )

    if "programId" in raw:
        return ParsedInstruction(
            program_id=raw["programId"],
            program=raw.get("program"),
            parsed=raw.get("parsed"),
            accounts=tuple(raw.get("accounts") or ()),
            data=raw.get("data"),
        )

    raise ValueError(f"Unrecognized instruction shape: {sorted(raw)}")
