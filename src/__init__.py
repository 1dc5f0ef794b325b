"""
Governance Projection - Event-sourced read model for token governance.

Folds the ordered log events of a governance token contract and its governor
contract into denormalized TokenHolder, Delegate, Proposal, Vote and
Governance records.

Projection Truths:
- The projected state is the fold of the entire event history in chain order
- Replaying the same log into an empty store yields identical state
- Anomalies are logged, never masked
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
