"""Winner resolution over the vote ledger.

Walks the ledger in insertion order and keeps the first choice that
reaches the highest tally. A later choice replaces the leader only with
a strictly greater count, so ties go to whichever tied choice was cast
first.
"""

from __future__ import annotations

from typing import NamedTuple

from ballot_ledger.domain.errors import NoVotesError
from ballot_ledger.domain.models.vote_ledger import VoteLedger


class Winner(NamedTuple):
    """Leading choice and its tally."""

    choice: int
    votes: int


def pick_winner(ledger: VoteLedger) -> Winner:
    """Determine the leading choice.

    Read-only: the ledger is never modified, so repeated calls return the
    same result until the next cast.

    Args:
        ledger: The ledger to resolve.

    Returns:
        Winner with the leading choice and its tally.

    Raises:
        NoVotesError: If the ledger is empty.
    """
    if len(ledger) == 0:
        raise NoVotesError()

    max_votes = 0
    winning_choice = 0

    for vote in ledger:
        vote_count = ledger.tally_for(vote.choice)
        if vote_count > max_votes:
            max_votes = vote_count
            winning_choice = vote.choice

    return Winner(choice=winning_choice, votes=max_votes)
