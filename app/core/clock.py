"""Time source for check-in window validation."""
from datetime import UTC, datetime


def get_now() -> int:
    """Dependency returning the current UTC time as epoch seconds."""
    return int(datetime.now(UTC).timestamp())
