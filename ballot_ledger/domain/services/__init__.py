"""Pure domain services for Ballot Ledger."""

from ballot_ledger.domain.services.winner_resolver import Winner, pick_winner

__all__: list[str] = ["Winner", "pick_winner"]
