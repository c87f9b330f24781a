"""Attendance registry: events, check-ins and organizer authority.

The registry is the only writer of registry state. Each public method is
one atomic operation: it runs under a single process-wide lock and inside
one database transaction, and it either commits every change together
with its notification or raises a ``RegistryError`` leaving state
untouched.

Queries on ids that were never created do not fail. ``get_event_details``
returns a zero-valued record and ``is_attending`` returns False, matching
the behaviour callers of the registry already rely on.
"""
import logging
import threading
from contextlib import AbstractContextManager, contextmanager

from fastapi import Depends
from sqlmodel import Session

from app.core.database import get_session
from app.core.identity import is_zero_identity, normalize_identity
from app.models import (
    REGISTRY_ID,
    Attendance,
    Event,
    Notification,
    NotificationKind,
    RegistryState,
)
from app.models.schemas import EventDetails
from app.registry.errors import (
    AlreadyCheckedIn,
    EventNotFound,
    InvalidAddress,
    InvalidTimeRange,
    OutsideCheckInWindow,
    RegistryError,
    RegistryNotInitialized,
    Unauthorized,
)

logger = logging.getLogger(__name__)

# One mutual-exclusion domain for every registry operation in the process.
registry_lock = threading.Lock()


def initialize_registry(session: Session, organizer: str) -> RegistryState:
    """Create the registry state row with ``organizer`` as the authority.

    Does nothing if the registry already exists, so an organizer transferred
    through ``update_organizer`` is kept across restarts.
    """
    with registry_lock:
        state = session.get(RegistryState, REGISTRY_ID)
        if state is not None:
            logger.info(f"Registry already initialized, organizer is {state.organizer}")
            return state

        if is_zero_identity(organizer):
            raise InvalidAddress("initialize_registry")

        state = RegistryState(
            id=REGISTRY_ID,
            organizer=normalize_identity(organizer),
            event_count=0,
        )
        session.add(state)
        session.commit()
        session.refresh(state)
        logger.info(f"Registry initialized with organizer {state.organizer}")
        return state


class AttendanceRegistry:
    """Operations on the attendance registry, bound to a database session."""

    def __init__(self, session: Session, lock: AbstractContextManager | None = None):
        self.session = session
        self.lock = lock or registry_lock

    @contextmanager
    def _transaction(self, operation: str):
        """Serialize an operation and commit or roll back all of its changes."""
        with self.lock:
            try:
                yield
                self.session.commit()
            except RegistryError as e:
                self.session.rollback()
                logger.warning(f"{operation} rejected: {e.name}: {e.detail}")
                raise
            except Exception as e:
                self.session.rollback()
                logger.error(f"{operation} failed: {e}")
                raise

    def _state(self, operation: str) -> RegistryState:
        state = self.session.get(RegistryState, REGISTRY_ID)
        if state is None:
            raise RegistryNotInitialized(operation)
        return state

    def _require_organizer(self, caller: str, operation: str) -> RegistryState:
        state = self._state(operation)
        if normalize_identity(caller) != state.organizer:
            raise Unauthorized(operation)
        return state

    def _active_event(self, event_id: int, operation: str) -> Event:
        event = self.session.get(Event, event_id) if event_id >= 0 else None
        if event is None or not event.exists:
            raise EventNotFound(operation, f"Event {event_id} does not exist or has been cancelled")
        return event

    def _emit(self, kind: NotificationKind, event_id: int | None, payload: dict) -> None:
        self.session.add(Notification(kind=kind, event_id=event_id, payload=payload))

    # Mutations

    def create_event(self, caller: str, name: str, start_time: int, end_time: int) -> int:
        """Register a new event and return its id.

        The id is the current event count; the count then grows by one.
        Only the organizer may create events, and the window must satisfy
        ``0 <= start_time < end_time``.
        """
        with self._transaction("create_event"):
            state = self._require_organizer(caller, "create_event")
            if start_time < 0 or not start_time < end_time:
                raise InvalidTimeRange(
                    "create_event",
                    f"Start time {start_time} must be before end time {end_time}",
                )

            event_id = state.event_count
            event = Event(
                id=event_id,
                name=name,
                start_time=start_time,
                end_time=end_time,
                exists=True,
            )
            state.event_count = event_id + 1
            self.session.add(event)
            self.session.add(state)
            self._emit(
                NotificationKind.EVENT_CREATED,
                event_id,
                {"name": name, "start_time": start_time, "end_time": end_time},
            )

        logger.info(f"Created event {event_id} '{name}' [{start_time}, {end_time}]")
        return event_id

    def check_in(self, caller: str, event_id: int, now: int) -> None:
        """Record the caller's attendance at an active event.

        Checks, in order: the event exists and is not cancelled, ``now``
        lies within ``[start_time, end_time]``, and the caller has not
        checked in before.
        """
        with self._transaction("check_in"):
            attendee = normalize_identity(caller)
            event = self._active_event(event_id, "check_in")
            if not event.start_time <= now <= event.end_time:
                raise OutsideCheckInWindow(
                    "check_in",
                    f"Time {now} is outside the check-in window "
                    f"[{event.start_time}, {event.end_time}] of event {event_id}",
                )
            if self.session.get(Attendance, (event_id, attendee)) is not None:
                raise AlreadyCheckedIn(
                    "check_in", f"{attendee} has already checked in to event {event_id}"
                )

            self.session.add(
                Attendance(event_id=event_id, attendee=attendee, checked_in_at=now)
            )
            self._emit(NotificationKind.CHECKED_IN, event_id, {"attendee": attendee})

        logger.info(f"{attendee} checked in to event {event_id}")

    def cancel_event(self, caller: str, event_id: int) -> None:
        """Cancel an active event. Its attendance records are kept."""
        with self._transaction("cancel_event"):
            self._require_organizer(caller, "cancel_event")
            event = self._active_event(event_id, "cancel_event")
            event.exists = False
            self.session.add(event)
            self._emit(NotificationKind.EVENT_CANCELLED, event_id, {})

        logger.info(f"Cancelled event {event_id}")

    def update_organizer(self, caller: str, new_organizer: str) -> None:
        """Transfer organizer authority to ``new_organizer``."""
        with self._transaction("update_organizer"):
            state = self._require_organizer(caller, "update_organizer")
            if is_zero_identity(new_organizer):
                raise InvalidAddress("update_organizer", "New organizer must not be the zero address")

            new_organizer = normalize_identity(new_organizer)
            state.organizer = new_organizer
            self.session.add(state)
            self._emit(
                NotificationKind.ORGANIZER_UPDATED, None, {"new_organizer": new_organizer}
            )

        logger.info(f"Organizer updated to {new_organizer}")

    # Queries

    def is_attending(self, event_id: int, attendee: str) -> bool:
        with self._transaction("is_attending"):
            if event_id < 0:
                return False
            record = self.session.get(Attendance, (event_id, normalize_identity(attendee)))
            return record is not None

    def get_event_details(self, event_id: int) -> EventDetails:
        with self._transaction("get_event_details"):
            event = self.session.get(Event, event_id) if event_id >= 0 else None
            if event is None:
                return EventDetails(event_id=event_id)
            return EventDetails(
                event_id=event_id,
                name=event.name,
                start_time=event.start_time,
                end_time=event.end_time,
                exists=event.exists,
            )

    def organizer(self) -> str:
        with self._transaction("organizer"):
            return self._state("organizer").organizer

    def event_count(self) -> int:
        with self._transaction("event_count"):
            return self._state("event_count").event_count


def get_registry(session: Session = Depends(get_session)) -> AttendanceRegistry:
    """Dependency for getting a registry bound to the request's session."""
    return AttendanceRegistry(session)
