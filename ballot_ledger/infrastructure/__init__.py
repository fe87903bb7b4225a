"""
Infrastructure layer - Adapters and observability for Ballot Ledger.

This layer contains:
- Observability (structlog configuration, correlation IDs)
- Adapters (logging event sink)
- Stubs (in-memory implementations for tests)
"""
