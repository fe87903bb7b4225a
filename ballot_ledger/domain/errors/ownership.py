"""Ownership domain errors.

Administrator-only operations (voter reset, ownership transfer, winner
declaration) fail with NotOwnerError for any other caller.
"""

from __future__ import annotations

from typing import Any

from ballot_ledger.domain.exceptions import BallotLedgerError


class OwnershipError(BallotLedgerError):
    """Base error for administrative operations."""

    problem_type: str = "urn:ballot-ledger:ownership:error"
    title: str = "Ownership Error"

    def to_rfc7807_dict(self) -> dict[str, Any]:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Dictionary conforming to RFC 7807 problem details.
        """
        return {
            "type": self.problem_type,
            "title": self.title,
            "detail": self.message,
        }


class NotOwnerError(OwnershipError):
    """Raised when a caller lacks administrative privilege.

    HTTP Status: 403 Forbidden

    Attributes:
        caller: The identity that attempted the privileged operation.
        operation: Name of the rejected operation.
    """

    problem_type = "urn:ballot-ledger:ownership:not-owner"
    title = "Not Owner"

    def __init__(self, caller: str, operation: str) -> None:
        self.caller = caller
        self.operation = operation
        super().__init__("Caller is not the owner")

    def to_rfc7807_dict(self) -> dict[str, Any]:
        result = super().to_rfc7807_dict()
        result["operation"] = self.operation
        return result


class LedgerAlreadyInitializedError(OwnershipError):
    """Raised when initialize() is called on an engine that already has an owner.

    Initialization is one-time-only; after it, the administrator changes
    only through an ownership transfer.

    HTTP Status: 409 Conflict

    Attributes:
        caller: The identity that attempted to re-initialize.
    """

    problem_type = "urn:ballot-ledger:ownership:already-initialized"
    title = "Already Initialized"

    def __init__(self, caller: str) -> None:
        self.caller = caller
        super().__init__("Ledger has already been initialized")
