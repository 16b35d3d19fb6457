"""
Solana program addresses and instruction layout constants.
"""

TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
MEMO_PROGRAM_ID = "MemoSq4gqABAXKb96qnH8TysNcWxMyWCqXgDLGmfcHr"

# SPL Token `Burn` instruction: [u8 discriminant][u64 LE amount]
BURN_DISCRIMINANT = 8
BURN_DATA_LENGTH = 9
BURN_MINT_ACCOUNT_POSITION = 1
PARSED_BURN_TYPE = "burn"

U64_MAX = 2**64 - 1
