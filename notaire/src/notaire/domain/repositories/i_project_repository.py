"""
Project repository interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from notaire.domain.entities.project import Project


class IProjectRepository(ABC):
    """Persistence operations the ownership verification flow needs."""

    @abstractmethod
    async def get_by_project_id(self, project_id: str) -> Optional[Project]:
        """
        Get project by ID.

        Args:
            project_id: Project identifier

        Returns:
            Project if found, None otherwise
        """

    @abstractmethod
    async def set_project_verified(
        self,
        project_id: str,
        verified_by_wallet: str,
        verified_at: datetime,
    ) -> Project:
        """
        Mark project ownership as verified.

        Args:
            project_id: Project identifier
            verified_by_wallet: Wallet whose burn proved ownership
            verified_at: Verification timestamp

        Returns:
            Updated Project

        Raises:
            EntityNotFoundError: If project does not exist
        """
