"""Vote record domain model.

This module defines the single immutable entry of the vote ledger:
- VoteRecord: One voter identity's choice and when it was cast

Records are created only by a successful cast and are never mutated
or deleted afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

# Choices are unsigned 256-bit labels (button numbers on the voting panel).
MAX_CHOICE: int = 2**256 - 1


@dataclass(frozen=True, eq=True)
class VoteRecord:
    """A single cast vote.

    Attributes:
        voter_tag: Opaque voter identity (e.g. an RFID tag id).
        choice: Unsigned integer label of the chosen option.
        cast_at: When the vote was recorded (timezone-aware).
    """

    voter_tag: str
    choice: int
    cast_at: datetime

    def __post_init__(self) -> None:
        """Validate record fields after initialization.

        Raises:
            ValueError: If any field validation fails.
        """
        if not isinstance(self.voter_tag, str) or not self.voter_tag:
            raise ValueError("voter_tag must be a non-empty string")

        # bool is an int subclass; True is not a button number
        if isinstance(self.choice, bool) or not isinstance(self.choice, int):
            raise ValueError(f"choice must be an integer, got {self.choice!r}")
        if not 0 <= self.choice <= MAX_CHOICE:
            raise ValueError(
                f"choice must be between 0 and 2**256 - 1, got {self.choice}"
            )

        if self.cast_at.tzinfo is None:
            raise ValueError("cast_at must be timezone-aware (UTC)")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary.

        Returns:
            Dictionary representation with an ISO 8601 ``cast_at``.
        """
        return {
            "voter_tag": self.voter_tag,
            "choice": self.choice,
            "cast_at": self.cast_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VoteRecord:
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by to_dict().

        Returns:
            VoteRecord instance.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If field values are invalid.
        """
        return cls(
            voter_tag=data["voter_tag"],
            choice=data["choice"],
            cast_at=datetime.fromisoformat(data["cast_at"]),
        )
