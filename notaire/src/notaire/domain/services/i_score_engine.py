"""
Score engine interface.
"""

from abc import ABC, abstractmethod


class IScoreEngine(ABC):
    """Recomputes a project's transparency score after a privileged write."""

    @abstractmethod
    async def recompute_score(self, project_id: str) -> int:
        """
        Recompute and store the project score.

        Args:
            project_id: Project identifier

        Returns:
            New score in the range 0..100
        """
