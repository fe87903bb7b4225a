"""Administration API routes.

Administrator-only operations. The caller identity comes from the
configured identity header (see LedgerConfig.identity_header); every
privileged endpoint answers 403 for anyone but the current administrator.
"""

from fastapi import APIRouter, Depends, Request

from ballot_ledger.api.dependencies.voting import (
    get_caller_identity,
    get_voting_engine,
)
from ballot_ledger.api.models.ownership import (
    OwnerResponse,
    OwnershipTransferResponse,
    TransferOwnershipRequest,
    VoterResetResponse,
)
from ballot_ledger.api.models.voting import ProblemDetailResponse, WinnerResponse
from ballot_ledger.api.problem_details import problem_exception
from ballot_ledger.application.services.voting_engine_service import (
    VotingEngineService,
)
from ballot_ledger.domain.errors import (
    LedgerAlreadyInitializedError,
    NotOwnerError,
    NoVotesError,
)

router = APIRouter(prefix="/v1/admin", tags=["admin"])

_NOT_OWNER_RESPONSE = {
    403: {"model": ProblemDetailResponse, "description": "Caller is not the owner"},
}


@router.get("/owner", response_model=OwnerResponse, summary="Get the administrator")
def get_owner(
    engine: VotingEngineService = Depends(get_voting_engine),
) -> OwnerResponse:
    return OwnerResponse(owner=engine.owner())


@router.post(
    "/initialize",
    response_model=OwnerResponse,
    status_code=201,
    responses={
        409: {"model": ProblemDetailResponse, "description": "Already initialized"},
    },
    summary="Become the first administrator",
)
def initialize(
    request: Request,
    caller: str = Depends(get_caller_identity),
    engine: VotingEngineService = Depends(get_voting_engine),
) -> OwnerResponse:
    """Initialize the ledger with the caller as administrator (one time only)."""
    try:
        engine.initialize(caller)
    except LedgerAlreadyInitializedError as e:
        raise problem_exception(e, request) from None

    return OwnerResponse(owner=caller)


@router.post(
    "/transfer-ownership",
    response_model=OwnershipTransferResponse,
    responses=_NOT_OWNER_RESPONSE,
    summary="Transfer administration",
)
def transfer_ownership(
    request_data: TransferOwnershipRequest,
    request: Request,
    caller: str = Depends(get_caller_identity),
    engine: VotingEngineService = Depends(get_voting_engine),
) -> OwnershipTransferResponse:
    try:
        engine.transfer_ownership(caller, request_data.new_owner)
    except NotOwnerError as e:
        raise problem_exception(e, request) from None

    return OwnershipTransferResponse(
        previous_owner=caller,
        new_owner=request_data.new_owner,
    )


@router.post(
    "/voters/{voter_tag}/reset",
    response_model=VoterResetResponse,
    responses=_NOT_OWNER_RESPONSE,
    summary="Restore a voter's eligibility",
)
def reset_vote(
    voter_tag: str,
    request: Request,
    caller: str = Depends(get_caller_identity),
    engine: VotingEngineService = Depends(get_voting_engine),
) -> VoterResetResponse:
    """Clear a voter's has-voted flag. Earlier votes stay counted."""
    try:
        engine.reset_vote(caller, voter_tag)
    except NotOwnerError as e:
        raise problem_exception(e, request) from None

    return VoterResetResponse(voter_tag=voter_tag, has_voted=False)


@router.post(
    "/winner/declare",
    response_model=WinnerResponse,
    responses={
        **_NOT_OWNER_RESPONSE,
        404: {"model": ProblemDetailResponse, "description": "No votes yet"},
    },
    summary="Announce the current winner",
)
def declare_winner(
    request: Request,
    caller: str = Depends(get_caller_identity),
    engine: VotingEngineService = Depends(get_voting_engine),
) -> WinnerResponse:
    try:
        winner = engine.declare_winner(caller)
    except (NotOwnerError, NoVotesError) as e:
        raise problem_exception(e, request) from None

    return WinnerResponse(winning_choice=winner.choice, votes=winner.votes)
