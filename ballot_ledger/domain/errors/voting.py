"""Voting domain errors.

This module provides exception classes for failed ledger operations:
duplicate casts, out-of-range lookups, winner queries on an empty
ledger, and casts attempted while another cast is in flight.

Every error leaves the ledger exactly as it was before the failed call.
"""

from __future__ import annotations

from typing import Any

from ballot_ledger.domain.exceptions import BallotLedgerError


class VotingError(BallotLedgerError):
    """Base error for vote casting and ledger queries."""

    problem_type: str = "urn:ballot-ledger:vote:error"
    title: str = "Voting Error"

    def to_rfc7807_dict(self) -> dict[str, Any]:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Dictionary conforming to RFC 7807 problem details.
        """
        return {
            "type": self.problem_type,
            "title": self.title,
            "detail": self.message,
        }


class AlreadyVotedError(VotingError):
    """Raised when a voter identity with a live vote tries to cast again.

    HTTP Status: 409 Conflict

    Attributes:
        voter_tag: The voter identity that already voted.
    """

    problem_type = "urn:ballot-ledger:vote:already-voted"
    title = "Already Voted"

    def __init__(self, voter_tag: str) -> None:
        self.voter_tag = voter_tag
        super().__init__("This tag has already voted.")

    def to_rfc7807_dict(self) -> dict[str, Any]:
        result = super().to_rfc7807_dict()
        result["voter_tag"] = self.voter_tag
        return result


class NoVotesError(VotingError):
    """Raised when a winner is requested before any vote exists.

    HTTP Status: 404 Not Found
    """

    problem_type = "urn:ballot-ledger:vote:no-votes"
    title = "No Votes"

    def __init__(self) -> None:
        super().__init__("No votes have been cast yet.")


class InvalidIndexError(VotingError):
    """Raised when a ledger index outside ``[0, vote_count)`` is requested.

    HTTP Status: 404 Not Found

    Attributes:
        index: The requested ledger index.
        vote_count: Ledger length at the time of the request.
    """

    problem_type = "urn:ballot-ledger:vote:invalid-index"
    title = "Invalid Index"

    def __init__(self, index: int, vote_count: int) -> None:
        self.index = index
        self.vote_count = vote_count
        super().__init__("Invalid vote index.")

    def to_rfc7807_dict(self) -> dict[str, Any]:
        result = super().to_rfc7807_dict()
        result["index"] = self.index
        result["vote_count"] = self.vote_count
        return result


class ReentrancyGuardError(VotingError):
    """Raised when a cast is attempted while another cast is in flight.

    The in-flight cast holds the engine's reentrancy lock from its
    duplicate check through event emission. A call arriving inside that
    window (for example from an event sink calling back into the engine)
    is rejected without touching the ledger.

    HTTP Status: 409 Conflict
    """

    problem_type = "urn:ballot-ledger:vote:reentrant-call"
    title = "Reentrant Call"

    def __init__(self) -> None:
        super().__init__("Reentrant call")
