"""Voting API request/response models.

Pydantic models for casting votes and reading the ledger, tally and
winner.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

from ballot_ledger.domain.models.vote_record import MAX_CHOICE

# ISO 8601 with Z suffix
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class CastVoteRequest(BaseModel):
    """Request to cast a vote.

    Attributes:
        voter_tag: Voter identity (e.g. RFID tag id).
        choice: Chosen option, an unsigned 256-bit integer.
    """

    voter_tag: str = Field(
        ...,
        min_length=1,
        description="Voter identity casting the vote",
    )
    choice: int = Field(
        ...,
        ge=0,
        le=MAX_CHOICE,
        description="Chosen option (unsigned integer)",
    )


class CastVoteResponse(BaseModel):
    """A vote as recorded in the ledger.

    Attributes:
        voter_tag: Voter identity that cast the vote.
        choice: Chosen option.
        cast_at: When the vote was recorded (ISO 8601).
    """

    voter_tag: str = Field(..., description="Voter identity that cast the vote")
    choice: int = Field(..., description="Chosen option")
    cast_at: DateTimeWithZ = Field(..., description="When the vote was recorded")


class VoteResponse(CastVoteResponse):
    """A ledger record looked up by position."""

    index: int = Field(..., ge=0, description="0-based position in the ledger")


class VoteCountResponse(BaseModel):
    vote_count: int = Field(..., ge=0, description="Number of records in the ledger")


class ChoiceTallyResponse(BaseModel):
    choice: int = Field(..., description="Option queried")
    votes: int = Field(..., ge=0, description="Votes recorded for the option")


class TallyTableResponse(BaseModel):
    """Whole tally table.

    JSON object keys are strings, so choices appear as their decimal text.
    """

    tallies: dict[int, int] = Field(
        default_factory=dict,
        description="Votes per choice",
    )


class VoterStatusResponse(BaseModel):
    voter_tag: str = Field(..., description="Voter identity queried")
    has_voted: bool = Field(..., description="Whether the voter holds a live vote")


class WinnerResponse(BaseModel):
    """Leading choice; ties go to the choice cast first."""

    winning_choice: int = Field(..., description="Leading choice")
    votes: int = Field(..., ge=1, description="Tally of the leading choice")


class ProblemDetailResponse(BaseModel):
    """RFC 7807 error body used by voting and admin endpoints."""

    type: str = Field(..., description="Problem type URN")
    title: str = Field(..., description="Short summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="Request URL")
