"""Ledger event sink writing every event to the structured log.

Default production sink: the log stream doubles as the notification
channel, one ``ledger_event_emitted`` entry per event with the event
payload flattened into the entry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from ballot_ledger.domain.events import LedgerEvent


class LoggingEventSink:
    """LedgerEventSinkProtocol implementation backed by structlog."""

    def __init__(self, logger: structlog.BoundLogger | None = None) -> None:
        self._log = logger or structlog.get_logger().bind(
            service=self.__class__.__name__,
            component="notifications",
        )

    def emit(self, event: LedgerEvent) -> None:
        self._log.info(
            "ledger_event_emitted",
            event_type=event.event_type,
            **event.to_dict(),
        )
