"""System time authority.

Production TimeAuthorityProtocol implementation backed by the host's
wall clock, always reporting UTC.
"""

from datetime import datetime, timezone

from ballot_ledger.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Time authority reading the system clock in UTC.

    Example:
        >>> authority = SystemTimeAuthority()
        >>> authority.now().tzinfo is timezone.utc
        True
    """

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
