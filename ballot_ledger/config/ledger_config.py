"""Ballot ledger host configuration.

Configuration for the HTTP host that wraps the voting engine, with
environment variable overrides.

Environment Variables:
- LEDGER_ENVIRONMENT: 'production' (JSON logs) or 'development' (console logs)
- LEDGER_ADMINISTRATOR: Identity to initialize the engine with at startup.
  Unset leaves the engine uninitialized until POST /v1/admin/initialize.
- LEDGER_IDENTITY_HEADER: Request header carrying the caller identity
  (default: X-Caller-Identity)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})

DEFAULT_IDENTITY_HEADER: str = "X-Caller-Identity"


def _get_str_env(key: str, default: str | None) -> str | None:
    """Get string environment variable with default.

    Blank values are treated as unset.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        Stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class LedgerConfig:
    """Configuration for the ballot ledger host.

    Attributes:
        environment: Logging mode, 'production' or 'development'.
        administrator: Identity used to auto-initialize the engine, or None.
        identity_header: Request header carrying the caller identity.
    """

    environment: str = "production"
    administrator: str | None = None
    identity_header: str = DEFAULT_IDENTITY_HEADER

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if self.administrator is not None and not self.administrator:
            raise ValueError("administrator must be a non-empty identity when set")
        if not self.identity_header:
            raise ValueError("identity_header must not be empty")

    @classmethod
    def from_environment(cls) -> LedgerConfig:
        """Create config from environment variables with defaults.

        Returns:
            LedgerConfig with values from environment or defaults.

        Raises:
            ValueError: If LEDGER_ENVIRONMENT names an unknown environment.
        """
        return cls(
            environment=(
                _get_str_env("LEDGER_ENVIRONMENT", "production") or "production"
            ).lower(),
            administrator=_get_str_env("LEDGER_ADMINISTRATOR", None),
            identity_header=(
                _get_str_env("LEDGER_IDENTITY_HEADER", DEFAULT_IDENTITY_HEADER)
                or DEFAULT_IDENTITY_HEADER
            ),
        )


# Default configuration instance
DEFAULT_LEDGER_CONFIG = LedgerConfig()
