"""Pydantic request/response models for the Ballot Ledger API."""
