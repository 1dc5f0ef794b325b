"""
Application layer - Projection use cases.

This layer contains:
- Ports (EntityStoreProtocol, ProjectionMetricsProtocol)
- Entity factories and event projection services
- The GovernanceProjector dispatcher

IMPORT RULES:
- CAN import from: domain, infrastructure.observability (correlation ids)
- Depends on ports, never on concrete adapters
"""
