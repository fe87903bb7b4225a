"""Unit tests for the ledger event sinks."""

from datetime import datetime, timezone

import pytest
from structlog.testing import capture_logs

from ballot_ledger.domain.events import (
    OWNERSHIP_TRANSFERRED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    OwnershipTransferredEvent,
    VoteCastEvent,
)
from ballot_ledger.infrastructure.adapters.logging_event_sink import LoggingEventSink
from ballot_ledger.infrastructure.stubs.ledger_event_sink_stub import (
    LedgerEventSinkStub,
)

CAST_AT = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def vote_event() -> VoteCastEvent:
    return VoteCastEvent(voter_tag="tagA", choice=1, cast_at=CAST_AT)


@pytest.fixture
def transfer_event() -> OwnershipTransferredEvent:
    return OwnershipTransferredEvent(previous_owner="admin", new_owner="deputy")


class TestLedgerEventSinkStub:
    def test_records_in_order(
        self,
        vote_event: VoteCastEvent,
        transfer_event: OwnershipTransferredEvent,
    ) -> None:
        sink = LedgerEventSinkStub()

        sink.emit(vote_event)
        sink.emit(transfer_event)

        assert sink.events == [vote_event, transfer_event]

    def test_events_of_type(
        self,
        vote_event: VoteCastEvent,
        transfer_event: OwnershipTransferredEvent,
    ) -> None:
        sink = LedgerEventSinkStub()
        sink.emit(vote_event)
        sink.emit(transfer_event)

        assert sink.events_of_type(VOTE_CAST_EVENT_TYPE) == [vote_event]
        assert sink.events_of_type(OWNERSHIP_TRANSFERRED_EVENT_TYPE) == [
            transfer_event
        ]

    def test_clear(self, vote_event: VoteCastEvent) -> None:
        sink = LedgerEventSinkStub()
        sink.emit(vote_event)

        sink.clear()

        assert sink.events == []

    def test_on_emit_callback(self, vote_event: VoteCastEvent) -> None:
        seen = []
        sink = LedgerEventSinkStub(on_emit=seen.append)

        sink.emit(vote_event)

        assert seen == [vote_event]

    def test_fail_with_records_then_raises(self, vote_event: VoteCastEvent) -> None:
        sink = LedgerEventSinkStub(fail_with=RuntimeError("down"))

        with pytest.raises(RuntimeError, match="down"):
            sink.emit(vote_event)

        assert sink.events == [vote_event]


class TestLoggingEventSink:
    def test_logs_vote_event_payload(self, vote_event: VoteCastEvent) -> None:
        with capture_logs() as logs:
            LoggingEventSink().emit(vote_event)

        assert len(logs) == 1
        entry = logs[0]
        assert entry["event"] == "ledger_event_emitted"
        assert entry["event_type"] == VOTE_CAST_EVENT_TYPE
        assert entry["voter_tag"] == "tagA"
        assert entry["choice"] == 1
        assert entry["cast_at"] == CAST_AT.isoformat()
        assert entry["log_level"] == "info"

    def test_logs_transfer_event_payload(
        self, transfer_event: OwnershipTransferredEvent
    ) -> None:
        with capture_logs() as logs:
            LoggingEventSink().emit(transfer_event)

        assert logs[0]["event_type"] == OWNERSHIP_TRANSFERRED_EVENT_TYPE
        assert logs[0]["previous_owner"] == "admin"
        assert logs[0]["new_owner"] == "deputy"
