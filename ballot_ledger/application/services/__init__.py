"""Application services for Ballot Ledger."""

from ballot_ledger.application.services.ownership_guard import OwnershipGuard
from ballot_ledger.application.services.time_authority_service import (
    SystemTimeAuthority,
)
from ballot_ledger.application.services.voting_engine_service import (
    VotingEngineService,
)

__all__: list[str] = ["OwnershipGuard", "SystemTimeAuthority", "VotingEngineService"]
