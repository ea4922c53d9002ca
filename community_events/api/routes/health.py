"""Health check routes for the FastAPI application."""

from fastapi import APIRouter, Request
from community_events import __version__
from community_events.config.environment import IS_PRODUCTION_ENVIRONMENT

router = APIRouter(tags=["health"])


@router.get("/")
async def health_check(request: Request):
    """Health check endpoint."""
    store = request.app.state.event_store
    return {
        "status": "healthy" if store is not None else "starting",
        "environment": "production" if IS_PRODUCTION_ENVIRONMENT else "development",
        "version": __version__,
        "events": len(store) if store is not None else 0
    }
