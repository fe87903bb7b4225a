"""Unit tests for VotingEngineService.

Tests the vote-casting state machine and its queries:
- Single vote per identity
- Ledger, has-voted flags and tally move together
- Administrator reset restores eligibility without touching the tally
- Events are emitted only for successful operations
"""

from datetime import timedelta

import pytest
from structlog.testing import capture_logs

from ballot_ledger.application.services.voting_engine_service import (
    VotingEngineService,
)
from ballot_ledger.domain.errors import (
    AlreadyVotedError,
    InvalidIndexError,
    LedgerAlreadyInitializedError,
    NotOwnerError,
    NoVotesError,
)
from ballot_ledger.domain.events import (
    OWNERSHIP_TRANSFERRED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    OwnershipTransferredEvent,
    VoteCastEvent,
    WinnerDeclaredEvent,
)
from ballot_ledger.infrastructure.stubs.ledger_event_sink_stub import (
    LedgerEventSinkStub,
)
from tests.conftest import ADMIN, OUTSIDER
from tests.helpers import FakeTimeAuthority


class TestCastVote:
    """Tests for cast_vote()."""

    def test_first_vote_succeeds(
        self,
        engine: VotingEngineService,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        vote = engine.cast_vote("tagA", 1)

        assert vote.voter_tag == "tagA"
        assert vote.choice == 1
        assert vote.cast_at == fake_time_authority.now()
        assert engine.get_vote_count() == 1
        assert engine.check_has_voted("tagA") is True
        assert engine.get_button_votes(1) == 1

    def test_duplicate_vote_rejected(self, engine: VotingEngineService) -> None:
        engine.cast_vote("tagA", 1)

        with pytest.raises(AlreadyVotedError) as exc_info:
            engine.cast_vote("tagA", 2)

        assert exc_info.value.voter_tag == "tagA"
        assert engine.tally_snapshot() == {1: 1}
        assert engine.get_vote_count() == 1

    def test_failed_cast_releases_lock(self, engine: VotingEngineService) -> None:
        engine.cast_vote("tagA", 1)

        with pytest.raises(AlreadyVotedError):
            engine.cast_vote("tagA", 2)

        assert engine.is_casting is False
        engine.cast_vote("tagB", 2)
        assert engine.get_vote_count() == 2

    def test_invalid_choice_rejected_without_state_change(
        self, engine: VotingEngineService
    ) -> None:
        with pytest.raises(ValueError):
            engine.cast_vote("tagA", -1)

        assert engine.get_vote_count() == 0
        assert engine.check_has_voted("tagA") is False
        assert engine.is_casting is False

    def test_cast_timestamps_follow_time_authority(
        self,
        engine: VotingEngineService,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        first = engine.cast_vote("tagA", 1)
        fake_time_authority.advance(seconds=30)
        second = engine.cast_vote("tagB", 1)

        assert second.cast_at - first.cast_at == timedelta(seconds=30)

    def test_cast_does_not_require_initialization(
        self, fake_time_authority: FakeTimeAuthority
    ) -> None:
        fresh = VotingEngineService(time_authority=fake_time_authority)

        fresh.cast_vote("tagA", 1)

        assert fresh.get_vote_count() == 1
        assert fresh.owner() is None

    def test_engines_are_independent(
        self, fake_time_authority: FakeTimeAuthority
    ) -> None:
        first = VotingEngineService(time_authority=fake_time_authority)
        second = VotingEngineService(time_authority=fake_time_authority)

        first.cast_vote("tagA", 1)

        assert second.get_vote_count() == 0
        second.cast_vote("tagA", 1)

    def test_cast_is_logged(self, fake_time_authority: FakeTimeAuthority) -> None:
        with capture_logs() as logs:
            fresh = VotingEngineService(time_authority=fake_time_authority)
            fresh.cast_vote("tagA", 1)
            with pytest.raises(AlreadyVotedError):
                fresh.cast_vote("tagA", 1)

        events = [entry["event"] for entry in logs]
        assert "vote_cast" in events
        assert "vote_rejected_already_voted" in events


class TestQueries:
    def test_get_vote_by_index(self, engine: VotingEngineService) -> None:
        engine.cast_vote("tagA", 1)
        engine.cast_vote("tagB", 2)

        assert engine.get_vote(0).voter_tag == "tagA"
        assert engine.get_vote(1).choice == 2

    def test_get_vote_out_of_range(self, engine: VotingEngineService) -> None:
        engine.cast_vote("tagA", 1)

        with pytest.raises(InvalidIndexError) as exc_info:
            engine.get_vote(1)

        assert exc_info.value.vote_count == 1

    def test_get_vote_on_empty_ledger(self, engine: VotingEngineService) -> None:
        with pytest.raises(InvalidIndexError):
            engine.get_vote(0)

    def test_get_vote_negative_index(self, engine: VotingEngineService) -> None:
        engine.cast_vote("tagA", 1)

        with pytest.raises(InvalidIndexError):
            engine.get_vote(-1)

    def test_unseen_choice_has_zero_votes(self, engine: VotingEngineService) -> None:
        assert engine.get_button_votes(99) == 0

    def test_unknown_voter_has_not_voted(self, engine: VotingEngineService) -> None:
        assert engine.check_has_voted("nobody") is False


class TestPickWinner:
    def test_empty_engine_raises_no_votes(self, engine: VotingEngineService) -> None:
        with pytest.raises(NoVotesError):
            engine.pick_winner()

    def test_majority_wins(self, engine: VotingEngineService) -> None:
        engine.cast_vote("A", 1)
        engine.cast_vote("B", 2)
        engine.cast_vote("C", 1)

        assert engine.pick_winner() == (1, 2)

    def test_tie_goes_to_first_cast(self, engine: VotingEngineService) -> None:
        engine.cast_vote("A", 1)
        engine.cast_vote("B", 2)

        assert engine.pick_winner() == (1, 1)

    def test_pick_winner_emits_nothing(
        self, engine: VotingEngineService, event_sink: LedgerEventSinkStub
    ) -> None:
        engine.cast_vote("A", 1)
        event_sink.clear()

        engine.pick_winner()

        assert event_sink.events == []


class TestResetVote:
    def test_reset_then_revote(self, engine: VotingEngineService) -> None:
        engine.cast_vote("tagA", 1)
        with pytest.raises(AlreadyVotedError):
            engine.cast_vote("tagA", 2)

        engine.reset_vote(ADMIN, "tagA")
        assert engine.check_has_voted("tagA") is False

        engine.cast_vote("tagA", 2)

        assert engine.get_vote_count() == 2
        assert engine.tally_snapshot() == {1: 1, 2: 1}
        assert engine.check_has_voted("tagA") is True

    def test_reset_keeps_original_record(self, engine: VotingEngineService) -> None:
        engine.cast_vote("tagA", 1)

        engine.reset_vote(ADMIN, "tagA")

        assert engine.get_vote(0).voter_tag == "tagA"
        assert engine.get_button_votes(1) == 1

    def test_reset_by_outsider_rejected(self, engine: VotingEngineService) -> None:
        engine.cast_vote("tagA", 1)

        with pytest.raises(NotOwnerError):
            engine.reset_vote(OUTSIDER, "tagA")

        assert engine.check_has_voted("tagA") is True

    def test_reset_emits_nothing(
        self, engine: VotingEngineService, event_sink: LedgerEventSinkStub
    ) -> None:
        engine.cast_vote("tagA", 1)
        event_sink.clear()

        engine.reset_vote(ADMIN, "tagA")

        assert event_sink.events == []


class TestInitialize:
    def test_initialize_sets_owner(self, engine: VotingEngineService) -> None:
        assert engine.owner() == ADMIN

    def test_second_initialize_rejected(self, engine: VotingEngineService) -> None:
        with pytest.raises(LedgerAlreadyInitializedError):
            engine.initialize(OUTSIDER)

        assert engine.owner() == ADMIN

    def test_privileged_ops_rejected_before_initialize(
        self, fake_time_authority: FakeTimeAuthority
    ) -> None:
        fresh = VotingEngineService(time_authority=fake_time_authority)

        with pytest.raises(NotOwnerError):
            fresh.reset_vote(ADMIN, "tagA")
        with pytest.raises(NotOwnerError):
            fresh.transfer_ownership(ADMIN, OUTSIDER)


class TestTransferOwnership:
    def test_transfer_by_owner(
        self, engine: VotingEngineService, event_sink: LedgerEventSinkStub
    ) -> None:
        engine.transfer_ownership(ADMIN, "deputy")

        assert engine.owner() == "deputy"
        assert event_sink.events_of_type(OWNERSHIP_TRANSFERRED_EVENT_TYPE) == [
            OwnershipTransferredEvent(previous_owner=ADMIN, new_owner="deputy")
        ]

    def test_transfer_by_outsider_rejected(
        self, engine: VotingEngineService, event_sink: LedgerEventSinkStub
    ) -> None:
        with pytest.raises(NotOwnerError):
            engine.transfer_ownership(OUTSIDER, OUTSIDER)

        assert engine.owner() == ADMIN
        assert event_sink.events == []

    def test_previous_owner_loses_privileges(self, engine: VotingEngineService) -> None:
        engine.transfer_ownership(ADMIN, "deputy")

        with pytest.raises(NotOwnerError):
            engine.reset_vote(ADMIN, "tagA")
        engine.reset_vote("deputy", "tagA")


class TestDeclareWinner:
    def test_declare_emits_winner_event(
        self, engine: VotingEngineService, event_sink: LedgerEventSinkStub
    ) -> None:
        engine.cast_vote("A", 3)
        engine.cast_vote("B", 3)

        winner = engine.declare_winner(ADMIN)

        assert winner == (3, 2)
        assert event_sink.events[-1] == WinnerDeclaredEvent(winning_choice=3, votes=2)

    def test_declare_requires_owner(self, engine: VotingEngineService) -> None:
        engine.cast_vote("A", 3)

        with pytest.raises(NotOwnerError):
            engine.declare_winner(OUTSIDER)

    def test_declare_on_empty_ledger(self, engine: VotingEngineService) -> None:
        with pytest.raises(NoVotesError):
            engine.declare_winner(ADMIN)


class TestEventEmission:
    def test_vote_cast_event_emitted(
        self,
        engine: VotingEngineService,
        event_sink: LedgerEventSinkStub,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        engine.cast_vote("tagA", 5)

        assert event_sink.events == [
            VoteCastEvent(voter_tag="tagA", choice=5, cast_at=fake_time_authority.now())
        ]

    def test_failed_cast_emits_nothing(
        self, engine: VotingEngineService, event_sink: LedgerEventSinkStub
    ) -> None:
        engine.cast_vote("tagA", 5)
        event_sink.clear()

        with pytest.raises(AlreadyVotedError):
            engine.cast_vote("tagA", 5)

        assert event_sink.events_of_type(VOTE_CAST_EVENT_TYPE) == []

    def test_sink_failure_does_not_undo_cast(
        self, fake_time_authority: FakeTimeAuthority
    ) -> None:
        broken_sink = LedgerEventSinkStub(fail_with=RuntimeError("sink down"))

        with capture_logs() as logs:
            fresh = VotingEngineService(
                time_authority=fake_time_authority,
                event_sink=broken_sink,
            )
            vote = fresh.cast_vote("tagA", 1)

        assert vote.choice == 1
        assert fresh.get_vote_count() == 1
        assert fresh.is_casting is False
        assert any(entry["event"] == "ledger_event_delivery_failed" for entry in logs)


class TestStateExport:
    def test_export_and_restore(
        self, engine: VotingEngineService, fake_time_authority: FakeTimeAuthority
    ) -> None:
        engine.cast_vote("tagA", 1)
        engine.cast_vote("tagB", 2)
        engine.reset_vote(ADMIN, "tagA")

        restored = VotingEngineService.from_state(
            engine.export_state(),
            time_authority=fake_time_authority,
        )

        assert restored.owner() == ADMIN
        assert restored.get_vote_count() == 2
        assert restored.tally_snapshot() == {1: 1, 2: 1}
        assert restored.check_has_voted("tagA") is False
        with pytest.raises(LedgerAlreadyInitializedError):
            restored.initialize(OUTSIDER)

    def test_restore_rejects_voter_without_vote(
        self, engine: VotingEngineService, fake_time_authority: FakeTimeAuthority
    ) -> None:
        engine.cast_vote("tagA", 1)
        state = engine.export_state()
        state["has_voted"]["ghost"] = True

        with pytest.raises(ValueError, match="ghost"):
            VotingEngineService.from_state(state, time_authority=fake_time_authority)
