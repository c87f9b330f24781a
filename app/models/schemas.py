"""Request and response bodies for the HTTP API."""

from sqlmodel import Field, SQLModel


class EventCreate(SQLModel):
    name: str
    start_time: int = Field(ge=0)
    end_time: int = Field(ge=0)


class EventCreated(SQLModel):
    event_id: int


class EventDetails(SQLModel):
    """Public view of an event; zero-valued for ids never created."""
    event_id: int
    name: str = ""
    start_time: int = 0
    end_time: int = 0
    exists: bool = False


class CheckInResult(SQLModel):
    event_id: int
    attendee: str
    checked_in: bool = True


class AttendanceStatus(SQLModel):
    event_id: int
    attendee: str
    attending: bool


class CancelResult(SQLModel):
    event_id: int
    exists: bool = False


class OrganizerUpdate(SQLModel):
    new_organizer: str


class OrganizerRead(SQLModel):
    organizer: str


class RegistryRead(SQLModel):
    organizer: str
    event_count: int
