"""Health check endpoint for Ballot Ledger API."""

from fastapi import APIRouter, Depends

from ballot_ledger.api.dependencies.voting import get_voting_engine
from ballot_ledger.api.models.health import HealthResponse
from ballot_ledger.application.services.voting_engine_service import (
    VotingEngineService,
)

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(
    engine: VotingEngineService = Depends(get_voting_engine),
) -> HealthResponse:
    """Return health status.

    Returns:
        Health status with 200 OK.
    """
    return HealthResponse(status="healthy", initialized=engine.owner() is not None)
