"""Notification model for the record of emitted registry notifications.

Every successful registry operation that changes state emits exactly one
notification. It is written in the same transaction as the change it
describes, so the log never contains a notification for an aborted
operation.
"""

from datetime import UTC, datetime
from enum import Enum

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class NotificationKind(str, Enum):
    EVENT_CREATED = "EventCreated"
    CHECKED_IN = "CheckedIn"
    EVENT_CANCELLED = "EventCancelled"
    ORGANIZER_UPDATED = "OrganizerUpdated"


class Notification(SQLModel, table=True):
    """A notification emitted by a committed registry operation.

    Attributes:
        id: Autoincrementing sequence number; reflects emission order.
        kind: Which operation emitted it.
        event_id: Event the notification concerns, if any.
        payload: Operation-specific data, e.g. the name and window of a
            created event or the identity that checked in.
        emitted_at: Wall-clock time the notification was recorded.
    """
    id: int | None = Field(default=None, primary_key=True)
    kind: NotificationKind = Field(index=True)
    event_id: int | None = Field(default=None, index=True)
    payload: dict = Field(default_factory=dict, sa_column=Column(JSON))
    emitted_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
