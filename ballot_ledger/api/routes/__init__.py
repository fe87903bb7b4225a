"""
API routes for Ballot Ledger.

Available routers:
- health: Health check endpoint
- votes: Casting and ledger queries
- admin: Administrator-only operations
"""

from ballot_ledger.api.routes.admin import router as admin_router
from ballot_ledger.api.routes.health import router as health_router
from ballot_ledger.api.routes.votes import router as votes_router

__all__: list[str] = ["admin_router", "health_router", "votes_router"]
