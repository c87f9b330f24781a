from app.models.attendance import Attendance
from app.models.event import Event
from app.models.notification import Notification, NotificationKind
from app.models.registry import REGISTRY_ID, RegistryState

__all__ = [
    "Event",
    "Attendance",
    "Notification",
    "NotificationKind",
    "RegistryState",
    "REGISTRY_ID",
]
