"""Ledger event sink protocol.

The voting engine hands every notification to a sink and moves on: the
engine never awaits, retries or inspects delivery. Where events go
(log stream, message bus, test recorder) is the host's choice.

A sink runs while the emitting cast still holds the reentrancy lock. A
sink that calls cast_vote on the same engine gets ReentrancyGuardError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ballot_ledger.domain.events import LedgerEvent


class LedgerEventSinkProtocol(Protocol):
    """Protocol for receiving ledger notifications."""

    def emit(self, event: LedgerEvent) -> None:
        """Deliver one ledger event.

        Args:
            event: VoteCastEvent, OwnershipTransferredEvent or WinnerDeclaredEvent.
        """
        ...
