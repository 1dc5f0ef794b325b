"""
Infrastructure layer - External adapters for the governance projection.

This layer contains:
- Entity store adapters (in-memory stub, SQLAlchemy)
- Event log reader (JSON lines)
- Prometheus metrics
- Structured logging configuration

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

__all__: list[str] = []
