"""Vote event payloads.

This module defines the notifications emitted by the voting engine:
- VoteCastEvent: After every successful cast
- WinnerDeclaredEvent: When the administrator announces the current leader

Failed operations never emit an event.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ballot_ledger.domain.models.vote_record import VoteRecord

# Event type constants
VOTE_CAST_EVENT_TYPE: str = "ledger.vote.cast"
WINNER_DECLARED_EVENT_TYPE: str = "ledger.winner.declared"

# Schema version for vote events
VOTE_EVENT_SCHEMA_VERSION: str = "1.0.0"


@dataclass(frozen=True, eq=True)
class VoteCastEvent:
    """Payload for a successfully cast vote.

    Attributes:
        voter_tag: Voter identity that cast the vote.
        choice: Chosen option.
        cast_at: When the vote was recorded (UTC).
    """

    voter_tag: str
    choice: int
    cast_at: datetime

    @property
    def event_type(self) -> str:
        return VOTE_CAST_EVENT_TYPE

    @classmethod
    def from_record(cls, vote: VoteRecord) -> VoteCastEvent:
        """Build the event for a freshly appended record."""
        return cls(voter_tag=vote.voter_tag, choice=vote.choice, cast_at=vote.cast_at)

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for event delivery.

        Returns:
            Dict representation including schema_version.
        """
        return {
            "voter_tag": self.voter_tag,
            "choice": self.choice,
            "cast_at": self.cast_at.isoformat(),
            "schema_version": VOTE_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class WinnerDeclaredEvent:
    """Payload for an administrator's winner announcement.

    Attributes:
        winning_choice: Choice leading the tally at declaration time.
        votes: Tally of the winning choice.
    """

    winning_choice: int
    votes: int

    @property
    def event_type(self) -> str:
        return WINNER_DECLARED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "winning_choice": self.winning_choice,
            "votes": self.votes,
            "schema_version": VOTE_EVENT_SCHEMA_VERSION,
        }
