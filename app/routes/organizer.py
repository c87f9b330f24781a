"""Organizer routes for reading and transferring registry authority."""
from fastapi import APIRouter, Depends

from app.core.identity import get_caller
from app.models.schemas import OrganizerRead, OrganizerUpdate, RegistryRead
from app.registry.service import AttendanceRegistry, get_registry

router = APIRouter(tags=["organizer"])


@router.get("/organizer", response_model=OrganizerRead)
async def current_organizer(registry: AttendanceRegistry = Depends(get_registry)):
    """Get the identity currently holding organizer authority."""
    return OrganizerRead(organizer=registry.organizer())


@router.put("/organizer", response_model=OrganizerRead)
async def update_organizer(
    body: OrganizerUpdate,
    caller: str = Depends(get_caller),
    registry: AttendanceRegistry = Depends(get_registry),
):
    """
    Transfer organizer authority (organizer only).

    The previous organizer loses authority as soon as this returns. Returns
    400 if the new organizer is blank or the zero address.
    """
    registry.update_organizer(caller, body.new_organizer)
    return OrganizerRead(organizer=registry.organizer())


@router.get("/registry", response_model=RegistryRead)
async def registry_state(registry: AttendanceRegistry = Depends(get_registry)):
    """Get the organizer and the number of events created so far."""
    return RegistryRead(organizer=registry.organizer(), event_count=registry.event_count())
