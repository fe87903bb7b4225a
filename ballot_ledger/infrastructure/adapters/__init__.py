"""Infrastructure adapters for Ballot Ledger ports."""

from ballot_ledger.infrastructure.adapters.logging_event_sink import LoggingEventSink

__all__: list[str] = ["LoggingEventSink"]
