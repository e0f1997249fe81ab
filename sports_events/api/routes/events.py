"""Events router module."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ...events.service import EventService
from ..dependencies import get_event_service
from ..errors import error_response

router = APIRouter(tags=["events"])

@router.get("/events", response_model=List[Dict])
async def list_events(service: EventService = Depends(get_event_service)):
    """Get all events, ordered by date and start time."""
    result = service.list_events()
    if not result.ok:
        return error_response(result.error)
    return result.value

@router.get("/events/{event_id}", response_model=Dict)
async def get_event(event_id: str, service: EventService = Depends(get_event_service)):
    """Get a single event by eventId."""
    result = service.get_event(event_id)
    if not result.ok:
        return error_response(result.error)
    return result.value

@router.post("/events", status_code=201, response_model=Dict)
def create_event(
    payload: Any = Body(...),
    service: EventService = Depends(get_event_service)
):
    """Create an event. The eventId is assigned by the server."""
    result = service.create_event(payload)
    if not result.ok:
        return error_response(result.error)
    return JSONResponse(status_code=201, content=result.value)

@router.put("/events/{event_id}", response_model=Dict)
def update_event(
    event_id: str,
    payload: Any = Body(...),
    service: EventService = Depends(get_event_service)
):
    """Partially update an event; only fields in the body are changed."""
    result = service.update_event(event_id, payload)
    if not result.ok:
        return error_response(result.error)
    return result.value

@router.delete("/events/{event_id}", response_model=Dict)
def delete_event(event_id: str, service: EventService = Depends(get_event_service)):
    """Delete an event and return the removed document."""
    result = service.delete_event(event_id)
    if not result.ok:
        return error_response(result.error)
    return result.value
