"""Domain services for the governance projection.

Domain services contain pure logic that doesn't naturally fit in entities.
They must NOT depend on infrastructure.

Available services:
- to_decimal: Scales raw token amounts to display decimals
- format_decimal: Canonical text form of a display decimal
- zero_crossing_delta: Counter adjustment for a single balance change
"""

from src.domain.services.decimals import (
    BIGDECIMAL_ZERO,
    DEFAULT_DECIMALS,
    format_decimal,
    to_decimal,
)
from src.domain.services.zero_crossing import zero_crossing_delta

__all__ = [
    "BIGDECIMAL_ZERO",
    "DEFAULT_DECIMALS",
    "format_decimal",
    "to_decimal",
    "zero_crossing_delta",
]
