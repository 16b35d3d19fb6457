"""
Domain service interfaces.
"""

from notaire.domain.services.i_burn_verifier import IBurnVerifier
from notaire.domain.services.i_ledger_client import ILedgerClient
from notaire.domain.services.i_score_engine import IScoreEngine
from notaire.domain.services.i_wallet_authenticator import IWalletAuthenticator

__all__ = [
    "IBurnVerifier",
    "ILedgerClient",
    "IScoreEngine",
    "IWalletAuthenticator",
]
