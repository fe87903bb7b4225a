"""Health check response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string (e.g., "healthy").
        initialized: Whether the ledger has an administrator.
    """

    status: str
    initialized: bool
