"""Request correlation IDs.

One ID per HTTP request, kept in a contextvar. FastAPI copies the request
context into its threadpool, so log lines the voting engine writes while
serving a request carry the same ID as the middleware's own lines.

Usage:
    token = set_correlation_id(incoming or generate_correlation_id())
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from contextvars import ContextVar, Token
from typing import Any
from uuid import uuid4

CORRELATION_HEADER = "X-Correlation-ID"

# Empty string means "no request in progress"
_correlation_id: ContextVar[str] = ContextVar(
    "ballot_ledger_correlation_id", default=""
)


def generate_correlation_id() -> str:
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the current request's correlation ID, or "" outside a request."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> Token[str]:
    """Make correlation_id current for this context.

    Returns:
        Token for reset_correlation_id().
    """
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    """Restore the correlation ID that was current before set_correlation_id()."""
    _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor stamping entries with the current correlation ID.

    Entries that already carry a correlation_id keep it. Nothing is added
    outside a request.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
