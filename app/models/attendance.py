"""Attendance model for recording check-ins.

A row is written the first time an identity checks in to an event and is
never updated or deleted afterwards. The absence of a row means the
identity has not checked in.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.event import Event


class Attendance(SQLModel, table=True):
    """A single identity's check-in to an event.

    Attributes:
        event_id: Foreign key to the Event checked in to.
        attendee: Normalized identity of the participant.
        checked_in_at: Clock reading (epoch seconds) when the check-in
            was accepted.
        event: Reference to the parent Event object.
    """
    event_id: int = Field(foreign_key="event.id", primary_key=True)
    attendee: str = Field(primary_key=True)
    checked_in_at: int

    # Relationship
    event: Optional["Event"] = Relationship(back_populates="attendances")
