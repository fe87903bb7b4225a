"""Structured logging for application services.

Services mix in LoggingMixin, call ``_init_logger()`` once in ``__init__``
and open one operation-scoped logger per public call:

    log = self._log_operation("cast_vote", voter_tag=voter_tag)
    log.info("vote_cast", choice=choice)
"""

import structlog

from ballot_ledger.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Gives a service a structlog logger bound to its name and component.

    Attributes:
        _log: Logger bound with ``service`` (class name) and ``component``.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "ledger") -> None:
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Return a logger scoped to one operation.

        The request's correlation ID is bound when the call happens inside
        an HTTP request, so it survives loggers configured without the
        correlation processor.

        Args:
            operation: Public method being performed.
            **context: Extra key/value pairs for every entry.
        """
        correlation_id = get_correlation_id()
        if correlation_id:
            context["correlation_id"] = correlation_id
        return self._log.bind(operation=operation, **context)
