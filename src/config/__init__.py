"""Configuration module for the governance projection.

Available Configurations:
- IndexerConfig: Token precision, environment and entity store location
"""

from src.config.indexer_config import (
    DEFAULT_INDEXER_CONFIG,
    TEST_INDEXER_CONFIG,
    IndexerConfig,
)

__all__ = [
    "IndexerConfig",
    "DEFAULT_INDEXER_CONFIG",
    "TEST_INDEXER_CONFIG",
]
