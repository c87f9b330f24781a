#!/usr/bin/env python3
"""
Print the attendance registry's state from the configured database.

Shows the organizer and event count, then the details of each requested
event id. Optionally reports whether an identity checked in to them.

Usage:
    python scripts/registry_status.py [EVENT_ID ...] [--attendee IDENTITY]

Options:
    --attendee IDENTITY    Also show whether IDENTITY checked in to each event
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlmodel import Session

from app.core.database import engine
from app.registry.errors import RegistryNotInitialized
from app.registry.service import AttendanceRegistry


def parse_args(argv: list[str]) -> tuple[list[int], str | None]:
    """Split arguments into event ids and an optional attendee identity."""
    event_ids = []
    attendee = None
    args = iter(argv)
    for arg in args:
        if arg == "--attendee":
            attendee = next(args, None)
            if attendee is None:
                print("Error: --attendee requires an identity")
                sys.exit(2)
        elif arg.isdigit():
            event_ids.append(int(arg))
        else:
            print(f"Error: not an event id: {arg}")
            sys.exit(2)
    return event_ids, attendee


def main(event_ids: list[int], attendee: str | None = None):
    """Print registry state and the requested events."""
    with Session(engine) as session:
        registry = AttendanceRegistry(session)
        try:
            organizer = registry.organizer()
            event_count = registry.event_count()
        except RegistryNotInitialized:
            print("Error: registry has not been initialized.")
            print("Start the application once to create it.")
            sys.exit(1)

        print(f"Organizer:   {organizer}")
        print(f"Event count: {event_count}")

        for event_id in event_ids:
            details = registry.get_event_details(event_id)
            status = "active" if details.exists else "cancelled or never created"
            print(f"\nEvent {event_id}: {details.name or '(no name)'}")
            print(f"  Window: [{details.start_time}, {details.end_time}]")
            print(f"  Status: {status}")
            if attendee is not None:
                attending = registry.is_attending(event_id, attendee)
                print(f"  {attendee} checked in: {'yes' if attending else 'no'}")


if __name__ == "__main__":
    ids, who = parse_args(sys.argv[1:])
    main(ids, attendee=who)
