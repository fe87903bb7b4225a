"""
Domain layer - Pure voting logic for Ballot Ledger.

This layer contains:
- Domain models (VoteRecord, VoteLedger)
- Domain events (vote cast, ownership transferred, winner declared)
- Domain services (winner resolution)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from ballot_ledger.domain.exceptions import BallotLedgerError

__all__: list[str] = ["BallotLedgerError"]
