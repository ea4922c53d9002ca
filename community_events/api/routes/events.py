"""Events router module."""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List, Dict

from community_events.models.event import ALL_CATEGORIES
from community_events.store import CapacityExceeded, EventStore, NotFound
from community_events.views import filter_options, project_event, project_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["events"])


def get_event_store(request: Request) -> EventStore:
    """Dependency returning the application's event store."""
    store = request.app.state.event_store
    if store is None:
        raise HTTPException(status_code=503, detail="Event store not initialized")
    return store


@router.get("/events", response_model=Dict)
async def get_events(category: str = ALL_CATEGORIES, store: EventStore = Depends(get_event_store)):
    """Get the events page for a category filter ('all' by default)."""
    try:
        return project_page(store.list_events(), category)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/events/filters", response_model=List[Dict])
async def get_filters():
    """Get the filter bar entries."""
    return [{"value": value, "label": label} for value, label in filter_options()]


@router.get("/events/{event_id}", response_model=Dict)
async def get_event(event_id: int, store: EventStore = Depends(get_event_store)):
    """Get a single event by ID."""
    try:
        return project_event(store.get(event_id))
    except NotFound:
        raise HTTPException(status_code=404, detail="Event not found")


@router.post("/events/{event_id}/registration", response_model=Dict)
async def toggle_registration(event_id: int, store: EventStore = Depends(get_event_store)):
    """Register for an event, or cancel an existing registration."""
    result = store.toggle_registration(event_id)
    if isinstance(result.error, NotFound):
        raise HTTPException(status_code=404, detail="Event not found")
    if isinstance(result.error, CapacityExceeded):
        raise HTTPException(status_code=409, detail=str(result.error))
    return project_event(result.unwrap())
