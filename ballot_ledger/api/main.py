"""FastAPI application entry point for Ballot Ledger."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ballot_ledger import __version__
from ballot_ledger.api.middleware.logging_middleware import LoggingMiddleware
from ballot_ledger.api.routes.admin import router as admin_router
from ballot_ledger.api.routes.health import router as health_router
from ballot_ledger.api.routes.votes import router as votes_router
from ballot_ledger.api.startup import configure_logging, initialize_administrator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    initialize_administrator()
    yield


def create_app() -> FastAPI:
    """Build the API application with all routers and middleware."""
    application = FastAPI(
        title="Ballot Ledger API",
        description="Append-only single-vote ledger",
        version=__version__,
        lifespan=lifespan,
    )
    application.add_middleware(LoggingMiddleware)
    application.include_router(health_router)
    application.include_router(votes_router)
    application.include_router(admin_router)
    return application


app = create_app()
