"""Voting engine service.

This module implements the vote-casting state machine on top of the
VoteLedger aggregate:

1. Reentrancy check - a cast already in flight rejects any new cast
2. Duplicate check - a voter with a live vote is rejected
3. Record - append, mark voter and bump tally in one step
4. Notify - hand a VoteCastEvent to the event sink
5. Release - the reentrancy lock is cleared on every exit path

Concurrency model:
    The engine is meant to be driven one call at a time. When a host does
    call it from several threads (for example FastAPI's threadpool), every
    operation runs under a single re-entrant state lock, so other threads
    wait their turn and reads always see ledger, has-voted flags and tally
    updated together. A call that re-enters cast_vote on the SAME thread
    (an event sink calling back into the engine) gets past the re-entrant
    lock but finds the reentrancy flag set and fails with
    ReentrancyGuardError.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from ballot_ledger.application.services.base import LoggingMixin
from ballot_ledger.application.services.ownership_guard import OwnershipGuard
from ballot_ledger.domain.errors import (
    AlreadyVotedError,
    InvalidIndexError,
    ReentrancyGuardError,
)
from ballot_ledger.domain.events import VoteCastEvent, WinnerDeclaredEvent
from ballot_ledger.domain.models.vote_ledger import VoteLedger
from ballot_ledger.domain.services.winner_resolver import Winner, pick_winner

if TYPE_CHECKING:
    import structlog

    from ballot_ledger.application.ports.ledger_event_sink import (
        LedgerEventSinkProtocol,
    )
    from ballot_ledger.application.ports.time_authority import TimeAuthorityProtocol
    from ballot_ledger.domain.events import LedgerEvent
    from ballot_ledger.domain.models.vote_record import VoteRecord


class VotingEngineService(LoggingMixin):
    """Single-vote-per-identity voting engine.

    Owns one VoteLedger and one OwnershipGuard. Independent engine
    instances share no state.

    Example:
        >>> from ballot_ledger.application.services import SystemTimeAuthority
        >>> engine = VotingEngineService(time_authority=SystemTimeAuthority())
        >>> engine.initialize(caller="admin")
        >>> vote = engine.cast_vote("tagA", 1)
        >>> engine.pick_winner()
        Winner(choice=1, votes=1)
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        event_sink: LedgerEventSinkProtocol | None = None,
        ledger: VoteLedger | None = None,
        ownership_guard: OwnershipGuard | None = None,
    ) -> None:
        """Initialize the voting engine.

        Args:
            time_authority: Source of cast timestamps.
            event_sink: Optional receiver for ledger notifications.
                If not provided, events are dropped.
            ledger: Existing ledger to resume from. Defaults to empty.
            ownership_guard: Existing guard to resume from. Defaults to
                an uninitialized guard.
        """
        self._time = time_authority
        self._event_sink = event_sink
        self._ledger = ledger if ledger is not None else VoteLedger()
        self._guard = (
            ownership_guard if ownership_guard is not None else OwnershipGuard()
        )
        self._state_lock = threading.RLock()
        self._locked = False
        self._init_logger()

    # =========================================================================
    # Administration
    # =========================================================================

    def initialize(self, caller: str) -> None:
        """One-time setup making the caller the administrator.

        Raises:
            LedgerAlreadyInitializedError: If the engine already has an
                administrator. The existing administrator is kept.
        """
        with self._state_lock:
            self._guard.initialize(caller)

    def owner(self) -> str | None:
        """Return the current administrator, or None before initialize()."""
        with self._state_lock:
            return self._guard.owner

    def transfer_ownership(self, caller: str, new_owner: str) -> None:
        """Replace the administrator.

        Args:
            caller: Identity requesting the transfer.
            new_owner: Identity that becomes administrator.

        Raises:
            NotOwnerError: If caller is not the current administrator.
        """
        with self._state_lock:
            event = self._guard.transfer(caller, new_owner)
            self._emit(event, self._log_operation("transfer_ownership", caller=caller))

    def reset_vote(self, caller: str, voter_tag: str) -> None:
        """Let a voter identity vote again.

        Only the has-voted flag changes. The voter's existing records stay
        in the ledger and the tally keeps counting them. No event is emitted.

        Raises:
            NotOwnerError: If caller is not the current administrator.
        """
        with self._state_lock:
            self._guard.require_owner(caller, "reset_vote")
            self._ledger.reset_voter(voter_tag)
            self._log_operation("reset_vote", caller=caller, voter_tag=voter_tag).info(
                "voter_reset"
            )

    def declare_winner(self, caller: str) -> Winner:
        """Announce the current leader to the event sink.

        Raises:
            NotOwnerError: If caller is not the current administrator.
            NoVotesError: If no vote has been cast.
        """
        with self._state_lock:
            self._guard.require_owner(caller, "declare_winner")
            winner = pick_winner(self._ledger)
            log = self._log_operation("declare_winner", caller=caller)
            log.info(
                "winner_declared",
                winning_choice=winner.choice,
                votes=winner.votes,
            )
            self._emit(
                WinnerDeclaredEvent(winning_choice=winner.choice, votes=winner.votes),
                log,
            )
            return winner

    # =========================================================================
    # Casting
    # =========================================================================

    def cast_vote(self, voter_tag: str, choice: int) -> VoteRecord:
        """Record one vote for a voter identity.

        Args:
            voter_tag: Voter identity casting the vote.
            choice: Chosen option (unsigned integer).

        Returns:
            The VoteRecord appended to the ledger.

        Raises:
            ReentrancyGuardError: Another cast is in flight on this engine.
            AlreadyVotedError: The voter already has a live vote.
            ValueError: voter_tag is empty or choice is not an unsigned
                256-bit integer.
        """
        log = self._log_operation("cast_vote", voter_tag=voter_tag, choice=choice)

        with self._state_lock:
            if self._locked:
                log.warning("vote_rejected_reentrant_call")
                raise ReentrancyGuardError()

            self._locked = True
            try:
                if self._ledger.has_voted(voter_tag):
                    log.warning("vote_rejected_already_voted")
                    raise AlreadyVotedError(voter_tag)

                vote = self._ledger.record(voter_tag, choice, self._time.now())
                log.info(
                    "vote_cast",
                    vote_index=len(self._ledger) - 1,
                    choice_votes=self._ledger.tally_for(choice),
                )

                self._emit(VoteCastEvent.from_record(vote), log)
            finally:
                self._locked = False

        return vote

    @property
    def is_casting(self) -> bool:
        """True while a cast holds the reentrancy lock."""
        return self._locked

    # =========================================================================
    # Queries
    # =========================================================================

    def get_vote_count(self) -> int:
        with self._state_lock:
            return len(self._ledger)

    def get_vote(self, index: int) -> VoteRecord:
        """Return the record at a 0-based ledger position.

        Raises:
            InvalidIndexError: If index is negative or >= the vote count.
        """
        with self._state_lock:
            vote = self._ledger.vote_at(index)
            if vote is None:
                raise InvalidIndexError(index=index, vote_count=len(self._ledger))
            return vote

    def get_button_votes(self, choice: int) -> int:
        with self._state_lock:
            return self._ledger.tally_for(choice)

    def tally_snapshot(self) -> dict[int, int]:
        """Return a copy of the whole tally table."""
        with self._state_lock:
            return self._ledger.tallies()

    def check_has_voted(self, voter_tag: str) -> bool:
        with self._state_lock:
            return self._ledger.has_voted(voter_tag)

    def pick_winner(self) -> Winner:
        """Return the leading choice; ties go to the earliest-cast choice.

        Raises:
            NoVotesError: If no vote has been cast.
        """
        with self._state_lock:
            return pick_winner(self._ledger)

    # =========================================================================
    # Persistence hand-off
    # =========================================================================

    def export_state(self) -> dict[str, Any]:
        """Serialize engine state for the host to persist.

        Returns:
            Ledger dictionary plus the current ``owner``.
        """
        with self._state_lock:
            state = self._ledger.to_dict()
            state["owner"] = self._guard.owner
            return state

    @classmethod
    def from_state(
        cls,
        state: dict[str, Any],
        time_authority: TimeAuthorityProtocol,
        event_sink: LedgerEventSinkProtocol | None = None,
    ) -> VotingEngineService:
        """Rebuild an engine from export_state() output.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If the stored ledger is inconsistent.
        """
        return cls(
            time_authority=time_authority,
            event_sink=event_sink,
            ledger=VoteLedger.from_dict(state),
            ownership_guard=OwnershipGuard(owner=state.get("owner")),
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _emit(self, event: LedgerEvent, log: structlog.BoundLogger) -> None:
        """Hand an event to the sink, fire-and-forget.

        The state change has already been applied when this runs. A sink
        failure cannot undo it, so the failure is logged and the operation
        still succeeds.
        """
        if self._event_sink is None:
            return
        try:
            self._event_sink.emit(event)
        except Exception:
            log.exception("ledger_event_delivery_failed", event_type=event.event_type)
