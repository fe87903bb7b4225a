"""Configuration for Ballot Ledger."""

from ballot_ledger.config.ledger_config import (
    DEFAULT_IDENTITY_HEADER,
    DEFAULT_LEDGER_CONFIG,
    LedgerConfig,
)

__all__: list[str] = [
    "DEFAULT_IDENTITY_HEADER",
    "DEFAULT_LEDGER_CONFIG",
    "LedgerConfig",
]
