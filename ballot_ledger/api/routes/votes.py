"""Voting API routes.

FastAPI router for casting votes and reading the ledger, the tally
table, voter status and the current winner.

Handlers are plain ``def`` functions: the voting engine is synchronous
and serializes callers with its own lock, so FastAPI runs these in its
threadpool.
"""

from fastapi import APIRouter, Depends, Request

from ballot_ledger.api.dependencies.voting import get_voting_engine
from ballot_ledger.api.models.voting import (
    CastVoteRequest,
    CastVoteResponse,
    ChoiceTallyResponse,
    ProblemDetailResponse,
    TallyTableResponse,
    VoteCountResponse,
    VoterStatusResponse,
    VoteResponse,
    WinnerResponse,
)
from ballot_ledger.api.problem_details import problem_exception
from ballot_ledger.application.services.voting_engine_service import (
    VotingEngineService,
)
from ballot_ledger.domain.errors import (
    AlreadyVotedError,
    InvalidIndexError,
    NoVotesError,
    ReentrancyGuardError,
)

router = APIRouter(prefix="/v1", tags=["votes"])


@router.post(
    "/votes",
    response_model=CastVoteResponse,
    status_code=201,
    responses={
        409: {
            "model": ProblemDetailResponse,
            "description": "Voter already voted, or another cast is in flight",
        },
    },
    summary="Cast a vote",
)
def cast_vote(
    request_data: CastVoteRequest,
    request: Request,
    engine: VotingEngineService = Depends(get_voting_engine),
) -> CastVoteResponse:
    """Cast one vote for a voter identity.

    Raises:
        HTTPException 409: Voter already has a live vote, or reentrant cast.
        RequestValidationError 422: Invalid voter tag or choice (pydantic).
    """
    try:
        vote = engine.cast_vote(request_data.voter_tag, request_data.choice)
    except (AlreadyVotedError, ReentrancyGuardError) as e:
        raise problem_exception(e, request) from None

    return CastVoteResponse(
        voter_tag=vote.voter_tag,
        choice=vote.choice,
        cast_at=vote.cast_at,
    )


@router.get("/votes/count", response_model=VoteCountResponse, summary="Count votes")
def get_vote_count(
    engine: VotingEngineService = Depends(get_voting_engine),
) -> VoteCountResponse:
    return VoteCountResponse(vote_count=engine.get_vote_count())


@router.get(
    "/votes/{index}",
    response_model=VoteResponse,
    responses={404: {"model": ProblemDetailResponse, "description": "Invalid index"}},
    summary="Get a vote by ledger position",
)
def get_vote(
    index: int,
    request: Request,
    engine: VotingEngineService = Depends(get_voting_engine),
) -> VoteResponse:
    """Return the vote at a 0-based ledger position."""
    try:
        vote = engine.get_vote(index)
    except InvalidIndexError as e:
        raise problem_exception(e, request) from None

    return VoteResponse(
        index=index,
        voter_tag=vote.voter_tag,
        choice=vote.choice,
        cast_at=vote.cast_at,
    )


@router.get("/tally", response_model=TallyTableResponse, summary="Get the tally table")
def get_tally(
    engine: VotingEngineService = Depends(get_voting_engine),
) -> TallyTableResponse:
    return TallyTableResponse(tallies=engine.tally_snapshot())


@router.get(
    "/tally/{choice}",
    response_model=ChoiceTallyResponse,
    summary="Get votes for one choice",
)
def get_choice_tally(
    choice: int,
    engine: VotingEngineService = Depends(get_voting_engine),
) -> ChoiceTallyResponse:
    return ChoiceTallyResponse(choice=choice, votes=engine.get_button_votes(choice))


@router.get(
    "/voters/{voter_tag}",
    response_model=VoterStatusResponse,
    summary="Check whether a voter holds a live vote",
)
def check_has_voted(
    voter_tag: str,
    engine: VotingEngineService = Depends(get_voting_engine),
) -> VoterStatusResponse:
    return VoterStatusResponse(
        voter_tag=voter_tag,
        has_voted=engine.check_has_voted(voter_tag),
    )


@router.get(
    "/winner",
    response_model=WinnerResponse,
    responses={404: {"model": ProblemDetailResponse, "description": "No votes yet"}},
    summary="Get the leading choice",
)
def get_winner(
    request: Request,
    engine: VotingEngineService = Depends(get_voting_engine),
) -> WinnerResponse:
    """Return the leading choice; ties go to the choice cast first."""
    try:
        winner = engine.pick_winner()
    except NoVotesError as e:
        raise problem_exception(e, request) from None

    return WinnerResponse(winning_choice=winner.choice, votes=winner.votes)
