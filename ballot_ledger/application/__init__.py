"""
Application layer - Use cases and ports for Ballot Ledger.

This layer contains:
- Ports (time authority, event sink)
- Services (voting engine, ownership guard)
"""
