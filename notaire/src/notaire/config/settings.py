"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# System program address, used as "unset" marker for the burn mint
PLACEHOLDER_MINT = "11111111111111111111111111111111"

# 6-decimal token: 500 tokens to verify a project, 10 tokens per vote
OWNERSHIP_BURN_AMOUNT = 500_000_000
VOTE_BURN_AMOUNT = 10_000_000


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All sensitive values (secrets, database credentials) should come from
    environment variables, not from YAML files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Notaire"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1024, le=65535)

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Database (from environment - REQUIRED in production)
    DATABASE_URL: str = Field(..., description="Database connection URL")
    DATABASE_ECHO: bool = Field(default=False)
    DATABASE_CREATE_TABLES: bool = Field(
        default=True,
        description="Create missing tables on startup",
    )

    # JWT Sessions (from environment - REQUIRED in production)
    JWT_SECRET_KEY: str = Field(..., description="JWT secret key")
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_EXPIRATION_HOURS: int = Field(
        default=720,
        ge=1,
        description="Session lifetime (default: 30 days)",
    )

    # Solana / Ledger
    SOLANA_RPC_URL: str = Field(
        default="https://api.mainnet-beta.solana.com",
        description="Solana RPC URL",
    )
    SOLANA_COMMITMENT: str = Field(default="confirmed")
    LEDGER_FETCH_TIMEOUT: float = Field(
        default=15.0,
        gt=0,
        description="Upper bound for one transaction fetch in seconds",
    )
    LEDGER_RPC_MAX_RETRIES: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Transport-level attempts inside the RPC client",
    )

    # Burn verification
    BURN_TOKEN_MINT: str = Field(
        default=PLACEHOLDER_MINT,
        description="SPL token mint accepted for burn proofs",
    )
    OWNERSHIP_BURN_AMOUNT: int = Field(
        default=OWNERSHIP_BURN_AMOUNT,
        ge=0,
        description="Minimum burn (base units) to verify project ownership",
    )
    VOTE_BURN_AMOUNT: int = Field(
        default=VOTE_BURN_AMOUNT,
        ge=0,
        description="Minimum burn (base units) to cast a vote",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("SOLANA_COMMITMENT")
    @classmethod
    def validate_commitment(cls, v: str) -> str:
        """Validate Solana commitment level."""
        allowed = ["confirmed", "finalized"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid SOLANA_COMMITMENT. Must be one of: {allowed}")
        return v_lower

    @property
    def burn_mint_is_placeholder(self) -> bool:
        """True while BURN_TOKEN_MINT still holds the unset marker."""
        return self.BURN_TOKEN_MINT == PLACEHOLDER_MINT


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        ValidationError: If required fields are missing
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    if env_file is None:
        default_env_file, default_config_file = env_map.get(
            environment, (".env.production", "production.yaml")
        )
        env_file = default_env_file
        if config_file is None:
            config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    if config_file:
        env_config_path = config_dir / config_file
        if env_config_path.exists():
            with open(env_config_path, "r") as f:
                loaded = yaml.safe_load(f)
                if loaded:
                    merged_config.update(loaded)

    # Environment variables win over YAML values
    for key in list(merged_config):
        if key in os.environ:
            merged_config.pop(key)

    return Settings(**merged_config)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
