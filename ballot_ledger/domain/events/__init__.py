"""Domain events for Ballot Ledger.

Every notification the ledger can emit is one of the payloads below.
``LedgerEvent`` is the union accepted by event sinks.
"""

from typing import Union

from ballot_ledger.domain.events.ownership import (
    OWNERSHIP_TRANSFERRED_EVENT_TYPE,
    OwnershipTransferredEvent,
)
from ballot_ledger.domain.events.vote import (
    VOTE_CAST_EVENT_TYPE,
    WINNER_DECLARED_EVENT_TYPE,
    VoteCastEvent,
    WinnerDeclaredEvent,
)

LedgerEvent = Union[VoteCastEvent, OwnershipTransferredEvent, WinnerDeclaredEvent]

__all__: list[str] = [
    "LedgerEvent",
    "OWNERSHIP_TRANSFERRED_EVENT_TYPE",
    "OwnershipTransferredEvent",
    "VOTE_CAST_EVENT_TYPE",
    "VoteCastEvent",
    "WINNER_DECLARED_EVENT_TYPE",
    "WinnerDeclaredEvent",
]
