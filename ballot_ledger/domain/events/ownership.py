"""Ownership event payloads.

- OwnershipTransferredEvent: After every successful administrator change

Voter resets are administrative too but deliberately emit nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

OWNERSHIP_TRANSFERRED_EVENT_TYPE: str = "ledger.ownership.transferred"

OWNERSHIP_EVENT_SCHEMA_VERSION: str = "1.0.0"


@dataclass(frozen=True, eq=True)
class OwnershipTransferredEvent:
    """Payload for an administrator handover.

    Attributes:
        previous_owner: Identity that held administration before the transfer.
        new_owner: Identity holding administration after the transfer.
    """

    previous_owner: str
    new_owner: str

    @property
    def event_type(self) -> str:
        return OWNERSHIP_TRANSFERRED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "previous_owner": self.previous_owner,
            "new_owner": self.new_owner,
            "schema_version": OWNERSHIP_EVENT_SCHEMA_VERSION,
        }
