"""
API layer - FastAPI host for Ballot Ledger.

Resolves the caller identity from request headers, hands calls to the
voting engine and renders domain errors as RFC 7807 problem details.
"""
