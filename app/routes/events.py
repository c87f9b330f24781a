"""Event routes for creating, cancelling and checking in to events."""
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from app.core.clock import get_now
from app.core.identity import get_caller, normalize_identity
from app.models.schemas import (
    AttendanceStatus,
    CancelResult,
    CheckInResult,
    EventCreate,
    EventCreated,
    EventDetails,
)
from app.registry.service import AttendanceRegistry, get_registry

router = APIRouter(prefix="/events", tags=["events"])

EventId = Annotated[
    int, Path(ge=0, description="Event id, as returned when the event was created")
]


@router.post("", status_code=201, response_model=EventCreated)
async def create_event(
    body: EventCreate,
    caller: str = Depends(get_caller),
    registry: AttendanceRegistry = Depends(get_registry),
):
    """
    Create a new event (organizer only).

    The new event's id is the registry's current event count. Returns 403
    for any caller other than the organizer and 400 when the start time is
    not strictly before the end time.
    """
    event_id = registry.create_event(caller, body.name, body.start_time, body.end_time)
    return EventCreated(event_id=event_id)


@router.get("/{event_id}", response_model=EventDetails)
async def event_details(
    event_id: EventId,
    registry: AttendanceRegistry = Depends(get_registry),
):
    """
    Get an event's name, window and existence flag.

    Ids that were never created return empty values with exists=false
    rather than 404.
    """
    return registry.get_event_details(event_id)


@router.post("/{event_id}/check-in", response_model=CheckInResult)
async def check_in(
    event_id: EventId,
    caller: str = Depends(get_caller),
    now: int = Depends(get_now),
    registry: AttendanceRegistry = Depends(get_registry),
):
    """
    Check the caller in to an event.

    Fails with 404 if the event does not exist or was cancelled, 409 if the
    current time is outside the event's window or the caller has already
    checked in.
    """
    registry.check_in(caller, event_id, now)
    return CheckInResult(event_id=event_id, attendee=caller)


@router.get("/{event_id}/attendees/{attendee}", response_model=AttendanceStatus)
async def attendance_status(
    event_id: EventId,
    attendee: str,
    registry: AttendanceRegistry = Depends(get_registry),
):
    """Report whether an identity has checked in to an event."""
    return AttendanceStatus(
        event_id=event_id,
        attendee=normalize_identity(attendee),
        attending=registry.is_attending(event_id, attendee),
    )


@router.post("/{event_id}/cancel", response_model=CancelResult)
async def cancel_event(
    event_id: EventId,
    caller: str = Depends(get_caller),
    registry: AttendanceRegistry = Depends(get_registry),
):
    """
    Cancel an event (organizer only).

    Cancellation is permanent and closes check-in immediately. Attendance
    recorded before cancellation stays readable.
    """
    registry.cancel_event(caller, event_id)
    return CancelResult(event_id=event_id)
