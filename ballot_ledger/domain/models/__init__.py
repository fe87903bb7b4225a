"""Domain models for Ballot Ledger."""

from ballot_ledger.domain.models.vote_ledger import VoteLedger
from ballot_ledger.domain.models.vote_record import MAX_CHOICE, VoteRecord

__all__: list[str] = ["MAX_CHOICE", "VoteLedger", "VoteRecord"]
