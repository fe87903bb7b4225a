"""In-memory stub for LedgerEventSinkProtocol.

This stub records every emitted event for assertions and can run a
callback on each emission, which is how tests drive a re-entrant call
into the engine while a cast is still in flight.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ballot_ledger.domain.events import LedgerEvent


class LedgerEventSinkStub:
    """Recording event sink.

    Attributes:
        events: Every event received, in emission order.
    """

    def __init__(
        self,
        on_emit: Callable[[LedgerEvent], None] | None = None,
        fail_with: Exception | None = None,
    ) -> None:
        """Initialize the stub.

        Args:
            on_emit: Optional callback run after each event is recorded.
            fail_with: Optional exception raised after recording, to
                simulate a broken delivery channel.
        """
        self.events: list[LedgerEvent] = []
        self._on_emit = on_emit
        self._fail_with = fail_with

    def emit(self, event: LedgerEvent) -> None:
        self.events.append(event)
        if self._on_emit is not None:
            self._on_emit(event)
        if self._fail_with is not None:
            raise self._fail_with

    def events_of_type(self, event_type: str) -> list[LedgerEvent]:
        """Return recorded events with a matching event_type."""
        return [event for event in self.events if event.event_type == event_type]

    def clear(self) -> None:
        self.events.clear()
