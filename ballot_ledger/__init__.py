"""
Ballot Ledger - Append-only single-vote ledger

Records exactly one vote per voter identity, keeps a running tally per
choice, and reports the leading choice on demand.

Ledger Truths:
- A cast vote is never removed or reordered
- A voter identity holds at most one live vote
- Only the administrator may restore voting eligibility
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
