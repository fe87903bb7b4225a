"""
Pytest configuration and shared fixtures for Ballot Ledger tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layout
- Time-dependent tests use FakeTimeAuthority, never the system clock
- Event assertions use LedgerEventSinkStub
"""

import pytest

from ballot_ledger.application.services.voting_engine_service import (
    VotingEngineService,
)
from ballot_ledger.infrastructure.stubs.ledger_event_sink_stub import (
    LedgerEventSinkStub,
)
from tests.helpers import FakeTimeAuthority

ADMIN = "admin-0x16f7"
OUTSIDER = "outsider-0x0bad"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from ballot_ledger import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Provide a frozen time authority at 2026-01-01T00:00:00Z."""
    return FakeTimeAuthority()


@pytest.fixture
def event_sink() -> LedgerEventSinkStub:
    """Provide a recording event sink."""
    return LedgerEventSinkStub()


@pytest.fixture
def engine(
    fake_time_authority: FakeTimeAuthority, event_sink: LedgerEventSinkStub
) -> VotingEngineService:
    """Provide an initialized engine administered by ADMIN."""
    voting_engine = VotingEngineService(
        time_authority=fake_time_authority,
        event_sink=event_sink,
    )
    voting_engine.initialize(ADMIN)
    return voting_engine
