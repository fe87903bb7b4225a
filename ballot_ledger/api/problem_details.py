"""RFC 7807 problem detail rendering for domain errors."""

from fastapi import HTTPException, Request

from ballot_ledger.domain.errors import (
    AlreadyVotedError,
    InvalidIndexError,
    LedgerAlreadyInitializedError,
    NotOwnerError,
    NoVotesError,
    ReentrancyGuardError,
)
from ballot_ledger.domain.exceptions import BallotLedgerError

# Most specific classes first; the first isinstance match wins.
_STATUS_BY_ERROR: tuple[tuple[type[BallotLedgerError], int], ...] = (
    (AlreadyVotedError, 409),
    (ReentrancyGuardError, 409),
    (LedgerAlreadyInitializedError, 409),
    (InvalidIndexError, 404),
    (NoVotesError, 404),
    (NotOwnerError, 403),
)


def status_for(error: BallotLedgerError) -> int:
    """Return the HTTP status for a domain error (500 if unmapped)."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return 500


def problem_exception(error: BallotLedgerError, request: Request) -> HTTPException:
    """Convert a domain error into an HTTPException with an RFC 7807 body.

    Args:
        error: The domain error raised by the engine.
        request: Current request, used for the ``instance`` member.

    Returns:
        HTTPException ready to raise.
    """
    status_code = status_for(error)
    to_dict = getattr(error, "to_rfc7807_dict", None)
    detail = (
        to_dict()
        if to_dict is not None
        else {"type": "about:blank", "title": "Ledger Error", "detail": str(error)}
    )
    detail["status"] = status_code
    detail["instance"] = str(request.url)
    return HTTPException(status_code=status_code, detail=detail)
