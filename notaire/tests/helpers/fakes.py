"""
In-memory implementations of the domain interfaces.
"""

import asyncio
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from notaire.domain.entities.ledger_transaction import ConfirmedTransaction
from notaire.domain.entities.project import Project
from notaire.domain.entities.vote import Vote
from notaire.domain.entities.wallet_profile import WalletProfile
from notaire.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from notaire.domain.repositories.i_project_repository import IProjectRepository
from notaire.domain.repositories.i_vote_repository import IVoteRepository
from notaire.domain.repositories.i_wallet_profile_repository import (
    IWalletProfileRepository,
)
from notaire.domain.services.i_ledger_client import ILedgerClient
from notaire.domain.services.i_score_engine import IScoreEngine


class FakeLedgerClient(ILedgerClient):
    """Serves transactions from a dict; can fail or stall on demand."""

    def __init__(
        self,
        transactions: Optional[Dict[str, ConfirmedTransaction]] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self.transactions = dict(transactions or {})
        self.error = error
        self.delay = delay
        self.calls: List[str] = []

    def add(self, tx: ConfirmedTransaction) -> None:
        self.transactions[tx.signature] = tx

    async def get_confirmed_transaction(
        self, tx_signature: str
    ) -> Optional[ConfirmedTransaction]:
        self.calls.append(tx_signature)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.transactions.get(tx_signature)


class InMemoryWalletProfileRepository(IWalletProfileRepository):
    def __init__(self):
        self.profiles: Dict[str, WalletProfile] = {}
        self.create_calls = 0

    async def get_by_wallet(self, wallet_address: str) -> Optional[WalletProfile]:
        return self.profiles.get(wallet_address)

    async def get_or_create(self, wallet_address: str) -> WalletProfile:
        profile = self.profiles.get(wallet_address)
        if profile is None:
            self.create_calls += 1
            profile = WalletProfile(wallet_address=wallet_address)
            self.profiles[wallet_address] = profile
        return profile

    async def get_by_username(self, username: str) -> Optional[WalletProfile]:
        for profile in self.profiles.values():
            if profile.username == username:
                return profile
        return None

    async def update(self, profile: WalletProfile) -> WalletProfile:
        if profile.wallet_address not in self.profiles:
            raise EntityNotFoundError("WalletProfile", profile.wallet_address)
        taken = profile.username is not None and any(
            other.username == profile.username
            for wallet, other in self.profiles.items()
            if wallet != profile.wallet_address
        )
        if taken:
            raise DuplicateEntityError("WalletProfile", f"username {profile.username}")
        self.profiles[profile.wallet_address] = profile
        return profile


class InMemoryProjectRepository(IProjectRepository):
    def __init__(self, *projects: Project):
        self.projects: Dict[str, Project] = {p.project_id: p for p in projects}

    async def get_by_project_id(self, project_id: str) -> Optional[Project]:
        return self.projects.get(project_id)

    async def set_project_verified(
        self,
        project_id: str,
        verified_by_wallet: str,
        verified_at: datetime,
    ) -> Project:
        project = self.projects.get(project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        project.verified = True
        project.verified_by_wallet = verified_by_wallet
        project.verified_at = verified_at
        return project


class InMemoryVoteRepository(IVoteRepository):
    def __init__(self):
        self.votes: Dict[Tuple[str, str], Vote] = {}

    async def get_vote(self, project_id: str, voter_wallet: str) -> Optional[Vote]:
        return self.votes.get((project_id, voter_wallet))

    async def is_transaction_used(self, transaction_signature: str) -> bool:
        return any(
            v.transaction_signature == transaction_signature
            for v in self.votes.values()
        )

    async def record_vote(self, vote: Vote) -> Vote:
        key = (vote.project_id, vote.voter_wallet)
        if key in self.votes:
            raise DuplicateEntityError("Vote", f"wallet {vote.voter_wallet}")
        self.votes[key] = vote
        return vote


class FixedScoreEngine(IScoreEngine):
    def __init__(self, score: int = 42):
        self.score = score
        self.recomputed: List[str] = []

    async def recompute_score(self, project_id: str) -> int:
        self.recomputed.append(project_id)
        return self.score
