"""Projection configuration.

This module defines configuration for the governance projection with
environment variable overrides for deployment.

Environment Variables:
- INDEXER_TOKEN_DECIMALS: Governance token decimal precision (default: 18)
- ENVIRONMENT: "production" for JSON logs, anything else for console logs
  (default: production)
- DATABASE_URL: SQLAlchemy URL of the entity store; unset means in-memory
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from src.domain.services.decimals import DEFAULT_DECIMALS

# 10**77 is the largest power of ten below the uint256 maximum
MIN_TOKEN_DECIMALS: int = 0
MAX_TOKEN_DECIMALS: int = 77


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class IndexerConfig:
    """Configuration for the governance projection.

    Attributes:
        token_decimals: Decimal precision used to scale raw token amounts.
        environment: Deployment environment; selects the log renderer.
        database_url: Entity store URL, or None for the in-memory store.
    """

    token_decimals: int = DEFAULT_DECIMALS
    environment: str = "production"
    database_url: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not MIN_TOKEN_DECIMALS <= self.token_decimals <= MAX_TOKEN_DECIMALS:
            raise ValueError(
                f"token_decimals must be between {MIN_TOKEN_DECIMALS} and "
                f"{MAX_TOKEN_DECIMALS}, got {self.token_decimals}"
            )
        if not self.environment:
            raise ValueError("environment must not be empty")

    @property
    def uses_database(self) -> bool:
        return bool(self.database_url)

    @classmethod
    def from_environment(cls) -> IndexerConfig:
        """Create config from environment variables with defaults.

        Returns:
            IndexerConfig with values from environment or defaults.
        """
        return cls(
            token_decimals=_get_int_env("INDEXER_TOKEN_DECIMALS", DEFAULT_DECIMALS),
            environment=os.environ.get("ENVIRONMENT", "production"),
            database_url=os.environ.get("DATABASE_URL") or None,
        )


# Default production config
DEFAULT_INDEXER_CONFIG = IndexerConfig()

# Testing config: console logs, in-memory store
TEST_INDEXER_CONFIG = IndexerConfig(environment="test")
