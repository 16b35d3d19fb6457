"""
Configuration module for Notaire.
"""

from notaire.config.settings import (
    OWNERSHIP_BURN_AMOUNT,
    PLACEHOLDER_MINT,
    VOTE_BURN_AMOUNT,
    Settings,
    get_settings,
    load_config,
    override_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "load_config",
    "override_settings",
    "reset_settings",
    "PLACEHOLDER_MINT",
    "OWNERSHIP_BURN_AMOUNT",
    "VOTE_BURN_AMOUNT",
]
