"""
Domain layer - Pure projection logic.

This layer contains:
- Projected entities (Governance, TokenHolder, Delegate, Proposal, Vote)
- Decoded chain events
- Decimal scaling and zero-crossing rules
- Domain exceptions

CRITICAL: This layer must NOT import from application or infrastructure.
Only stdlib and typing imports are allowed.
"""

from src.domain.exceptions import ProjectionError

__all__ = ["ProjectionError"]
