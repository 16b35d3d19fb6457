"""
Persistence infrastructure.
"""

from notaire.infrastructure.persistence.database import Database
from notaire.infrastructure.persistence.models import Base, WalletProfileModel

__all__ = ["Base", "Database", "WalletProfileModel"]
