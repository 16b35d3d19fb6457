"""
Data Transfer Objects for Notaire application layer.
"""

from notaire.application.dto.auth_dto import AuthenticatedSession

__all__ = ["AuthenticatedSession"]
