"""
Project entity - the record whose ownership a burn proof verifies.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Project:
    """Project fields the verification flow reads or writes."""

    project_id: str
    owner_wallet: str
    name: str = ""
    verified: bool = False
    verified_at: Optional[datetime] = None
    verified_by_wallet: Optional[str] = None
    transparency_score: int = 0
