"""structlog configuration for the ballot ledger host.

``configure_structlog()`` runs once at API startup:

- production: one JSON object per line, exceptions flattened to text
- development: coloured console output

Every entry gets ``level``, an ISO ``timestamp`` and, during a request,
``correlation_id``. The minimum level comes from ``LOG_LEVEL`` (default
INFO); unknown names fall back to INFO.
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from ballot_ledger.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"


def _get_log_level() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _renderers(environment: str) -> list[Processor]:
    if environment == "development":
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_structlog(environment: str = "production") -> None:
    """Install the process-wide structlog configuration.

    Args:
        environment: "production" (JSON) or "development" (console). Any
            other value renders JSON.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=processors + _renderers(environment),
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
