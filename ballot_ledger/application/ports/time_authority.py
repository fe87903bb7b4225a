"""Time Authority Protocol - interface for timestamp provisioning.

The voting engine stamps every VoteRecord with the time reported by an
injected TimeAuthorityProtocol instead of calling datetime.now() directly.
The ledger does not check that reported times are monotonic.

For production:
    Use SystemTimeAuthority from ballot_ledger/application/services/

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority."""

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness.

        Returns:
            Current datetime with timezone information (UTC recommended).
        """
        ...
