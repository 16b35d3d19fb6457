"""
Dependency Injection Container for Notaire.

Manages all service instances and their dependencies.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from notaire.application.use_cases.authenticate_wallet import AuthenticateWallet
from notaire.application.use_cases.cast_vote import CastVote
from notaire.application.use_cases.generate_auth_message import (
    GenerateAuthMessage,
)
from notaire.application.use_cases.get_wallet_profile import GetWalletProfile
from notaire.application.use_cases.update_wallet_profile import (
    UpdateWalletProfile,
)
from notaire.application.use_cases.verify_project_ownership import (
    VerifyProjectOwnership,
)
from notaire.config.settings import get_settings
from notaire.domain.repositories.i_project_repository import IProjectRepository
from notaire.domain.repositories.i_vote_repository import IVoteRepository
from notaire.domain.repositories.i_wallet_profile_repository import (
    IWalletProfileRepository,
)
from notaire.domain.services.i_burn_verifier import IBurnVerifier
from notaire.domain.services.i_ledger_client import ILedgerClient
from notaire.domain.services.i_score_engine import IScoreEngine
from notaire.domain.services.i_wallet_authenticator import IWalletAuthenticator
from notaire.infrastructure.auth.solana_wallet_adapter import SolanaWalletAdapter
from notaire.infrastructure.blockchain.solana_rpc_client import SolanaRpcClient
from notaire.infrastructure.blockchain.transaction_verifier import (
    SolanaBurnVerifier,
)
from notaire.infrastructure.monitoring.logger import get_logger
from notaire.infrastructure.persistence.database import Database
from notaire.infrastructure.persistence.repositories.wallet_profile_repository import (  # noqa: E501
    WalletProfileRepository,
)

logger = get_logger(__name__)


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of services. Repositories and use cases
    are session-scoped and built per request.
    """

    def __init__(self):
        """Initialize container with None instances."""
        # Infrastructure
        self._database: Optional[Database] = None
        self._ledger_client: Optional[ILedgerClient] = None

        # Domain Services
        self._burn_verifier: Optional[IBurnVerifier] = None
        self._wallet_authenticator: Optional[IWalletAuthenticator] = None

    async def initialize(self) -> None:
        """Initialize services and establish connections."""
        settings = get_settings()
        await self.database.connect()
        if settings.DATABASE_CREATE_TABLES:
            await self.database.create_tables()
            logger.info("Database tables ensured")

        if settings.burn_mint_is_placeholder:
            logger.error(
                "BURN_TOKEN_MINT is not configured; every burn proof will be "
                "rejected until it is set"
            )

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._database:
            await self._database.disconnect()

        if self._ledger_client:
            await self._ledger_client.close()

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=get_settings().DATABASE_URL,
                echo=get_settings().DATABASE_ECHO,
            )
        return self._database

    @property
    def ledger_client(self) -> ILedgerClient:
        """Get Solana RPC ledger client instance."""
        if self._ledger_client is None:
            settings = get_settings()
            self._ledger_client = SolanaRpcClient(
                rpc_url=settings.SOLANA_RPC_URL,
                commitment=settings.SOLANA_COMMITMENT,
                max_retries=settings.LEDGER_RPC_MAX_RETRIES,
            )
        return self._ledger_client

    # Domain Service Getters

    @property
    def burn_verifier(self) -> IBurnVerifier:
        """Get burn verifier instance."""
        if self._burn_verifier is None:
            settings = get_settings()
            self._burn_verifier = SolanaBurnVerifier(
                ledger_client=self.ledger_client,
                burn_mint=settings.BURN_TOKEN_MINT,
                ownership_burn_amount=settings.OWNERSHIP_BURN_AMOUNT,
                vote_burn_amount=settings.VOTE_BURN_AMOUNT,
                fetch_timeout=settings.LEDGER_FETCH_TIMEOUT,
            )
        return self._burn_verifier

    @property
    def wallet_authenticator(self) -> IWalletAuthenticator:
        """Get wallet authenticator instance."""
        if self._wallet_authenticator is None:
            self._wallet_authenticator = SolanaWalletAdapter()
        return self._wallet_authenticator

    # Repository Getters (session-scoped)

    def get_wallet_profile_repository(
        self, session: AsyncSession
    ) -> IWalletProfileRepository:
        """
        Get wallet profile repository bound to a session.

        Args:
            session: Active database session

        Returns:
            WalletProfileRepository instance
        """
        return WalletProfileRepository(session)

    # Use Case Getters

    def get_generate_auth_message(self) -> GenerateAuthMessage:
        """Get challenge generator use case."""
        return GenerateAuthMessage(app_name=get_settings().APP_NAME)

    def get_authenticate_wallet(self, session: AsyncSession) -> AuthenticateWallet:
        """Get authenticate wallet use case with session-scoped repos."""
        return AuthenticateWallet(
            profile_repository=self.get_wallet_profile_repository(session),
            wallet_authenticator=self.wallet_authenticator,
        )

    def get_get_wallet_profile(self, session: AsyncSession) -> GetWalletProfile:
        """Get wallet profile use case with session-scoped repos."""
        return GetWalletProfile(
            profile_repository=self.get_wallet_profile_repository(session),
        )

    def get_update_wallet_profile(self, session: AsyncSession) -> UpdateWalletProfile:
        """Get update wallet profile use case with session-scoped repos."""
        return UpdateWalletProfile(
            profile_repository=self.get_wallet_profile_repository(session),
        )

    def get_verify_project_ownership(
        self,
        project_repository: IProjectRepository,
        score_engine: IScoreEngine,
    ) -> VerifyProjectOwnership:
        """
        Get project ownership use case.

        Project persistence and scoring live with the host application, so
        their implementations are passed in.
        """
        return VerifyProjectOwnership(
            project_repository=project_repository,
            burn_verifier=self.burn_verifier,
            score_engine=score_engine,
        )

    def get_cast_vote(
        self,
        vote_repository: IVoteRepository,
        score_engine: IScoreEngine,
    ) -> CastVote:
        """Get cast vote use case (host supplies vote persistence and scoring)."""
        return CastVote(
            vote_repository=vote_repository,
            burn_verifier=self.burn_verifier,
            score_engine=score_engine,
            vote_burn_amount=get_settings().VOTE_BURN_AMOUNT,
        )


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container (for testing)."""
    global _container
    _container = None


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()
