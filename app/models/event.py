"""Event model for time-bounded, check-in capable events.

This module defines the Event model, the record the organizer creates and
participants check in to. Events are never physically removed: cancelling
one clears its ``exists`` flag and keeps the record and its attendance
history readable.
"""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.attendance import Attendance


class Event(SQLModel, table=True):
    """An event registered by the organizer.

    Ids are handed out by the registry from its event counter, densely and
    in creation order starting at 0, so the primary key is never generated
    by the database.

    Attributes:
        id: Event id, equal to the registry's event count at creation.
        name: Opaque text label.
        start_time: Start of the check-in window (epoch seconds, inclusive).
        end_time: End of the check-in window (epoch seconds, inclusive).
            Always greater than ``start_time`` at creation.
        exists: True from creation until cancellation. Cancellation is
            terminal; no operation sets it back to True.
        attendances: Check-in records for this event.
    """
    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    name: str = ""
    start_time: int = Field(default=0, ge=0)
    end_time: int = Field(default=0, ge=0)
    exists: bool = Field(default=True)

    # Relationships
    attendances: list["Attendance"] = Relationship(back_populates="event")
