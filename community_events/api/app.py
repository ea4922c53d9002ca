"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Internal imports
from community_events import __version__
from community_events.config.environment import IS_PRODUCTION_ENVIRONMENT, EVENTS_SEED_FILE
from community_events.config.cors import CORS_CONFIG
from community_events.utils.logging_config import setup_logging
from community_events.store import EventStore, EventStoreError, load_seed
from .routes import events, health

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the event store on startup unless one was injected."""
    # Startup
    if getattr(app.state, 'event_store', None) is None:
        try:
            app.state.event_store = EventStore(load_seed(app.state.seed_file))
            logger.info("Event store initialized successfully")
        except (EventStoreError, OSError) as e:
            logger.error(f"Startup failed: {e}")
            raise
    yield


def create_application(
    store: Optional[EventStore] = None,
    seed_file: Optional[str] = EVENTS_SEED_FILE
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Pre-built event store; seeded from `seed_file` on startup if omitted
        seed_file: JSON seed file, sample events are used when None
    """
    app = FastAPI(
        title="Community Events API",
        description="API for listing community events and managing registrations",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )
    app.state.event_store = store
    app.state.seed_file = seed_file

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    # Include health check router without prefix
    app.include_router(health.router)

    # Include routers with prefix
    app.include_router(events.router, prefix="/api")

    return app

# Create the application instance
app = create_application()
