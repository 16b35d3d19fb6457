"""
SQLAlchemy models for Notaire persistence.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""


class WalletProfileModel(Base):
    """Wallet profile database model - Web3 wallet-based identity."""

    __tablename__ = "wallet_profiles"

    wallet_address: Mapped[str] = mapped_column(String(44), primary_key=True)
    username: Mapped[str | None] = mapped_column(String(50), unique=True)
    full_name: Mapped[str | None] = mapped_column(String(255))
    avatar_url: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now
    )
