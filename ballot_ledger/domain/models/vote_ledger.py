"""Vote ledger aggregate.

The VoteLedger owns the three pieces of voting state that must change
together:
- the append-only sequence of VoteRecords
- the has-voted flag per voter identity
- the running tally per choice

``record()`` builds the VoteRecord, appends it, marks the voter and bumps
the tally in a single call, so no caller ever holds a half-written entry.
The ledger itself performs no duplicate or permission checks; that is the
voting engine's job.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from datetime import datetime
from typing import Any

from ballot_ledger.domain.models.vote_record import VoteRecord


class VoteLedger:
    """Append-only vote ledger with its has-voted set and tally table.

    Invariants:
        - ``len(ledger)`` never decreases; records are never reordered.
        - ``tally_for(c)`` equals the number of records with choice ``c``.
          Voter resets never decrement it.
        - ``has_voted(tag)`` is True iff ``tag`` cast a vote that has not
          been reset since.

    Thread-safety note: The ledger is NOT thread-safe. The voting engine
    serializes every access behind its own lock.
    """

    def __init__(self) -> None:
        """Initialize an empty ledger."""
        self._votes: list[VoteRecord] = []
        self._has_voted: dict[str, bool] = {}
        self._tallies: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._votes)

    def __iter__(self) -> Iterator[VoteRecord]:
        return iter(self._votes)

    def record(self, voter_tag: str, choice: int, cast_at: datetime) -> VoteRecord:
        """Construct a VoteRecord and apply it to the ledger.

        The record is validated before any state changes, so a rejected
        record leaves the ledger untouched.

        Args:
            voter_tag: Voter identity casting the vote.
            choice: Chosen option.
            cast_at: Timestamp supplied by the time authority.

        Returns:
            The appended VoteRecord.

        Raises:
            ValueError: If the record fields are invalid.
        """
        vote = VoteRecord(voter_tag=voter_tag, choice=choice, cast_at=cast_at)

        self._votes.append(vote)
        self._has_voted[voter_tag] = True
        self._tallies[choice] = self._tallies.get(choice, 0) + 1

        return vote

    def vote_at(self, index: int) -> VoteRecord | None:
        """Return the record at a 0-based ledger position, or None if out of range."""
        if 0 <= index < len(self._votes):
            return self._votes[index]
        return None

    def has_voted(self, voter_tag: str) -> bool:
        return self._has_voted.get(voter_tag, False)

    def reset_voter(self, voter_tag: str) -> None:
        """Clear a voter's has-voted flag so the identity may vote again.

        Existing records and tallies are left as they are.
        """
        self._has_voted[voter_tag] = False

    def tally_for(self, choice: int) -> int:
        return self._tallies.get(choice, 0)

    def tallies(self) -> dict[int, int]:
        """Return a copy of the tally table."""
        return dict(self._tallies)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the full ledger state for host persistence.

        Tally keys are stringified so the result is JSON-compatible.

        Returns:
            Dictionary with ``votes``, ``has_voted`` and ``tallies``.
        """
        return {
            "votes": [vote.to_dict() for vote in self._votes],
            "has_voted": dict(self._has_voted),
            "tallies": {str(choice): count for choice, count in self._tallies.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VoteLedger:
        """Rebuild a ledger from to_dict() output.

        Tallies are recomputed from the votes. A stored tally table that
        disagrees with the votes means the snapshot is corrupt.

        Args:
            data: Dictionary produced by to_dict().

        Returns:
            VoteLedger with identical votes, flags and tallies.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If a record is invalid, a has-voted flag is not a
                bool or names a voter with no record, or the stored
                tallies do not match the recorded votes.
        """
        ledger = cls()
        ledger._votes = [VoteRecord.from_dict(item) for item in data["votes"]]
        voters = {vote.voter_tag for vote in ledger._votes}

        for tag, flag in data.get("has_voted", {}).items():
            if not isinstance(flag, bool):
                raise ValueError(f"has_voted flag for {tag!r} must be a bool")
            if flag and tag not in voters:
                raise ValueError(f"Voter {tag!r} is marked as voted but has no vote")
            ledger._has_voted[str(tag)] = flag

        ledger._tallies = dict(Counter(vote.choice for vote in ledger._votes))

        stored = data.get("tallies")
        if stored is not None:
            stored_tallies = {
                int(choice): int(count) for choice, count in stored.items()
            }
            if stored_tallies != ledger._tallies:
                raise ValueError("Stored tallies do not match recorded votes")

        return ledger
