"""Application ports (abstract interfaces to the host)."""

from ballot_ledger.application.ports.ledger_event_sink import LedgerEventSinkProtocol
from ballot_ledger.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = ["LedgerEventSinkProtocol", "TimeAuthorityProtocol"]
