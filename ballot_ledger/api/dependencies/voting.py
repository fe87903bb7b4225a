"""Voting API dependencies.

Dependency injection setup for the voting engine and caller identity.
The engine is a process-wide singleton so every request sees the same
ledger; tests swap it with init_voting_engine() / reset_voting_engine().
"""

from fastapi import HTTPException, Request

from ballot_ledger.application.services.time_authority_service import (
    SystemTimeAuthority,
)
from ballot_ledger.application.services.voting_engine_service import (
    VotingEngineService,
)
from ballot_ledger.config.ledger_config import LedgerConfig
from ballot_ledger.infrastructure.adapters.logging_event_sink import LoggingEventSink

_ledger_config: LedgerConfig | None = None
_voting_engine: VotingEngineService | None = None


def get_ledger_config() -> LedgerConfig:
    """Get ledger configuration, loading it from the environment on first use."""
    global _ledger_config
    if _ledger_config is None:
        _ledger_config = LedgerConfig.from_environment()
    return _ledger_config


def get_voting_engine() -> VotingEngineService:
    """Get the voting engine instance.

    Creates an engine with the system clock and the logging event sink on
    first use.

    Returns:
        The process-wide VotingEngineService.
    """
    global _voting_engine
    if _voting_engine is None:
        _voting_engine = VotingEngineService(
            time_authority=SystemTimeAuthority(),
            event_sink=LoggingEventSink(),
        )
    return _voting_engine


def init_voting_engine(
    engine: VotingEngineService | None = None,
    config: LedgerConfig | None = None,
) -> None:
    """Install a specific engine and/or configuration.

    Args:
        engine: Engine to serve. None keeps lazy creation.
        config: Configuration to use. None keeps environment loading.
    """
    global _voting_engine, _ledger_config
    _voting_engine = engine
    _ledger_config = config


def reset_voting_engine() -> None:
    """Drop the singleton engine and configuration (for tests)."""
    global _voting_engine, _ledger_config
    _voting_engine = None
    _ledger_config = None


def get_caller_identity(request: Request) -> str:
    """Resolve the caller identity from the configured request header.

    Raises:
        HTTPException 401: If the header is missing or blank.
    """
    header = get_ledger_config().identity_header
    caller = request.headers.get(header, "").strip()
    if not caller:
        raise HTTPException(
            status_code=401,
            detail={
                "type": "urn:ballot-ledger:identity:missing",
                "title": "Caller Identity Missing",
                "status": 401,
                "detail": f"Request must carry a {header} header",
                "instance": str(request.url),
            },
        )
    return caller
