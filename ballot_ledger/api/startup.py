"""Startup configuration for the Ballot Ledger API.

This module provides startup hooks that:
1. Configure structured logging for the configured environment
2. Initialize the voting engine with LEDGER_ADMINISTRATOR when it is set

Usage in FastAPI (see main.py lifespan):
    configure_logging()
    initialize_administrator()
"""

from structlog import get_logger

from ballot_ledger.api.dependencies.voting import get_ledger_config, get_voting_engine
from ballot_ledger.infrastructure.observability import configure_structlog

logger = get_logger(__name__)


def configure_logging() -> None:
    """Configure structlog from LEDGER_ENVIRONMENT."""
    configure_structlog(environment=get_ledger_config().environment)


def initialize_administrator() -> None:
    """Initialize the engine with the configured administrator, if any.

    An engine that already has an administrator (for example one installed
    by init_voting_engine()) is left alone.
    """
    config = get_ledger_config()
    engine = get_voting_engine()

    if config.administrator is None:
        logger.info("ledger_awaiting_initialization")
        return

    if engine.owner() is not None:
        logger.info("ledger_already_initialized", owner=engine.owner())
        return

    engine.initialize(config.administrator)
    logger.info("ledger_initialized_from_config", owner=config.administrator)
