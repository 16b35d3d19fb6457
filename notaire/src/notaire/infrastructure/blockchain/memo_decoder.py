"""
SPL Memo decoder.
"""

import base64
from typing import Optional

from notaire.domain.entities.ledger_transaction import (
    CompiledInstruction,
    ParsedInstruction,
)
from notaire.domain.value_objects.findings import MemoFinding
from notaire.infrastructure.blockchain.instruction_scanner import ScannedInstruction


def _utf8(data: bytes) -> Optional[str]:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _text_from_string_payload(payload: str) -> str:
    """Strict base64 first, literal text when that fails."""
    try:
        decoded = _utf8(base64.b64decode(payload, validate=True))
    except ValueError:
        # binascii.Error, or non-ASCII input
        decoded = None
    return decoded if decoded is not None else payload


def decode_memo(scanned: ScannedInstruction) -> MemoFinding:
    """
    Decode a memo-program instruction.

    Raw bytes must be valid UTF-8. String payloads are tried as strict
    base64 first and taken literally otherwise. Parsed memos (a string, or
    a dict with ``memo``) are used as-is.

    Args:
        scanned: Memo-program instruction from the scanner

    Returns:
        MemoFinding (``found=False`` when nothing could be decoded)
    """
    ix = scanned.instruction
    text: Optional[str] = None

    if isinstance(ix, CompiledInstruction):
        text = _utf8(ix.data)
    elif isinstance(ix, ParsedInstruction):
        if isinstance(ix.parsed, str):
            text = ix.parsed
        elif isinstance(ix.parsed, dict) and isinstance(ix.parsed.get("memo"), str):
            text = ix.parsed["memo"]
        elif isinstance(ix.data, str):
            text = _text_from_string_payload(ix.data)

    if not text:
        return MemoFinding.none()
    return MemoFinding(found=True, text=text, source=scanned.source)
