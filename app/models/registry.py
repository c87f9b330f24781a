"""Registry state model: the organizer and the event counter."""

from sqlmodel import Field, SQLModel

REGISTRY_ID = 1


class RegistryState(SQLModel, table=True):
    """Singleton row holding registry-wide state.

    Attributes:
        id: Always ``REGISTRY_ID``.
        organizer: Identity allowed to create and cancel events and to
            transfer this authority.
        event_count: Number of events ever created; the id of the next one.
    """
    id: int = Field(default=REGISTRY_ID, primary_key=True)
    organizer: str
    event_count: int = Field(default=0, ge=0)
