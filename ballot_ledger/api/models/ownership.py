"""Administration API request/response models."""

from pydantic import BaseModel, Field


class OwnerResponse(BaseModel):
    owner: str | None = Field(
        None,
        description="Current administrator, null before initialization",
    )


class TransferOwnershipRequest(BaseModel):
    new_owner: str = Field(
        ...,
        min_length=1,
        description="Identity that becomes administrator",
    )


class OwnershipTransferResponse(BaseModel):
    previous_owner: str = Field(..., description="Administrator before the transfer")
    new_owner: str = Field(..., description="Administrator after the transfer")


class VoterResetResponse(BaseModel):
    """Result of restoring a voter's eligibility.

    Earlier votes by the voter remain in the ledger and the tally.
    """

    voter_tag: str = Field(..., description="Voter identity reset")
    has_voted: bool = Field(False, description="Always false after a reset")
