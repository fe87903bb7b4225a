"""Ownership guard for administrator-only operations.

Holds the single administrator identity and decides whether a caller may
perform a privileged operation. The guard never touches the ledger; the
voting engine calls require_owner() before applying a privileged change.

Lifecycle of the administrator:
- None until initialize() runs
- set exactly once by initialize()
- replaced only by transfer() called by the current administrator
- never cleared back to None
"""

from __future__ import annotations

from ballot_ledger.application.services.base import LoggingMixin
from ballot_ledger.domain.errors import LedgerAlreadyInitializedError, NotOwnerError
from ballot_ledger.domain.events import OwnershipTransferredEvent


class OwnershipGuard(LoggingMixin):
    """Gatekeeper for the administrator identity.

    Thread-safety note: The guard is NOT thread-safe on its own. The
    voting engine calls it only while holding its state lock.

    Example:
        >>> guard = OwnershipGuard()
        >>> guard.initialize("admin")
        >>> guard.require_owner("admin", "reset_vote")
        >>> event = guard.transfer("admin", "deputy")
        >>> guard.owner
        'deputy'
    """

    def __init__(self, owner: str | None = None) -> None:
        """Initialize the guard.

        Args:
            owner: Administrator restored from persisted state. Leave as
                None for a fresh ledger that still needs initialize().
        """
        if owner is not None and not owner:
            raise ValueError("owner must be a non-empty identity")
        self._owner = owner
        self._init_logger()

    @property
    def owner(self) -> str | None:
        """Current administrator, or None before initialization."""
        return self._owner

    @property
    def is_initialized(self) -> bool:
        return self._owner is not None

    def initialize(self, caller: str) -> None:
        """Make the caller the administrator.

        Args:
            caller: Identity invoking initialization.

        Raises:
            LedgerAlreadyInitializedError: If an administrator is already set.
            ValueError: If caller is empty.
        """
        log = self._log_operation("initialize", caller=caller)

        if self._owner is not None:
            log.warning("initialize_rejected_already_initialized", owner=self._owner)
            raise LedgerAlreadyInitializedError(caller)
        if not caller:
            raise ValueError("caller must be a non-empty identity")

        self._owner = caller
        log.info("ledger_initialized")

    def require_owner(self, caller: str, operation: str) -> None:
        """Reject callers other than the administrator.

        Args:
            caller: Identity invoking the privileged operation.
            operation: Operation name, for logging and the error.

        Raises:
            NotOwnerError: If caller is not the administrator, including
                when no administrator has been set yet.
        """
        if self._owner is None or caller != self._owner:
            self._log_operation(operation, caller=caller).warning(
                "privileged_operation_rejected",
                reason="not_owner",
            )
            raise NotOwnerError(caller=caller, operation=operation)

    def transfer(self, caller: str, new_owner: str) -> OwnershipTransferredEvent:
        """Hand administration to a new identity.

        Args:
            caller: Identity requesting the transfer.
            new_owner: Identity that becomes administrator.

        Returns:
            OwnershipTransferredEvent describing the handover.

        Raises:
            NotOwnerError: If caller is not the administrator.
            ValueError: If new_owner is empty.
        """
        self.require_owner(caller, "transfer_ownership")
        if not new_owner:
            raise ValueError("new_owner must be a non-empty identity")

        previous_owner = caller
        self._owner = new_owner

        self._log_operation("transfer_ownership", caller=caller).info(
            "ownership_transferred",
            previous_owner=previous_owner,
            new_owner=new_owner,
        )
        return OwnershipTransferredEvent(
            previous_owner=previous_owner,
            new_owner=new_owner,
        )
