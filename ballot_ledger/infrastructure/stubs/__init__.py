"""In-memory stub implementations of Ballot Ledger ports."""

from ballot_ledger.infrastructure.stubs.ledger_event_sink_stub import (
    LedgerEventSinkStub,
)

__all__: list[str] = ["LedgerEventSinkStub"]
