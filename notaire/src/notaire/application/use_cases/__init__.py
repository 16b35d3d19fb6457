"""Application use cases."""

from notaire.application.use_cases.authenticate_wallet import AuthenticateWallet
from notaire.application.use_cases.cast_vote import CastVote
from notaire.application.use_cases.generate_auth_message import (
    GenerateAuthMessage,
)
from notaire.application.use_cases.get_wallet_profile import GetWalletProfile
from notaire.application.use_cases.update_wallet_profile import (
    UpdateWalletProfile,
    UpdateWalletProfileCommand,
)
from notaire.application.use_cases.verify_project_ownership import (
    VerifyProjectOwnership,
)

__all__ = [
    "AuthenticateWallet",
    "CastVote",
    "GenerateAuthMessage",
    "GetWalletProfile",
    "UpdateWalletProfile",
    "UpdateWalletProfileCommand",
    "VerifyProjectOwnership",
]
