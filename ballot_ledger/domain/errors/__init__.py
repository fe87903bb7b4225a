"""Domain errors for Ballot Ledger.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from BallotLedgerError.
"""

from ballot_ledger.domain.errors.ownership import (
    LedgerAlreadyInitializedError,
    NotOwnerError,
    OwnershipError,
)
from ballot_ledger.domain.errors.voting import (
    AlreadyVotedError,
    InvalidIndexError,
    NoVotesError,
    ReentrancyGuardError,
    VotingError,
)

__all__: list[str] = [
    "AlreadyVotedError",
    "InvalidIndexError",
    "LedgerAlreadyInitializedError",
    "NoVotesError",
    "NotOwnerError",
    "OwnershipError",
    "ReentrancyGuardError",
    "VotingError",
]
