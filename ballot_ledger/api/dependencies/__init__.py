"""API dependencies for dependency injection."""

from ballot_ledger.api.dependencies.voting import (
    get_caller_identity,
    get_ledger_config,
    get_voting_engine,
    init_voting_engine,
    reset_voting_engine,
)

__all__: list[str] = [
    "get_caller_identity",
    "get_ledger_config",
    "get_voting_engine",
    "init_voting_engine",
    "reset_voting_engine",
]
