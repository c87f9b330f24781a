"""Failures raised by registry operations.

Every error is a precondition violation: the operation that raised it has
made no change to registry state. Errors carry the name of the operation
they aborted so callers can report them verbatim.
"""


class RegistryError(Exception):
    """Base class for registry failures."""

    default_detail = "Registry operation failed"

    def __init__(self, operation: str, detail: str | None = None):
        self.operation = operation
        self.detail = detail or self.default_detail
        super().__init__(f"{operation}: {self.detail}")

    @property
    def name(self) -> str:
        return type(self).__name__


class Unauthorized(RegistryError):
    default_detail = "Caller is not the organizer"


class InvalidTimeRange(RegistryError):
    default_detail = "Start time must be before end time"


class EventNotFound(RegistryError):
    default_detail = "Event does not exist or has been cancelled"


class OutsideCheckInWindow(RegistryError):
    default_detail = "Check-in is only allowed between the event's start and end time"


class AlreadyCheckedIn(RegistryError):
    default_detail = "Caller has already checked in to this event"


class InvalidAddress(RegistryError):
    default_detail = "Identity must not be empty or the zero address"


class RegistryNotInitialized(RegistryError):
    default_detail = "Registry state has not been initialized"
