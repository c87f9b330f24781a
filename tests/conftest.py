"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event as sa_event
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from app.core.clock import get_now
from app.core.database import get_session, set_sqlite_pragma
from app.main import app
from app.registry.service import AttendanceRegistry, initialize_registry

ORGANIZER = "0x" + "a" * 40
ALICE = "0x" + "b" * 40
BOB = "0x" + "c" * 40


class FakeClock:
    """Settable time source standing in for the wall clock."""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    sa_event.listen(engine, "connect", set_sqlite_pragma)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create a new database session with an initialized registry."""
    with Session(engine) as session:
        initialize_registry(session, ORGANIZER)
        yield session


@pytest.fixture(name="registry")
def registry_fixture(session: Session) -> AttendanceRegistry:
    """Registry bound to the test session."""
    return AttendanceRegistry(session)


@pytest.fixture(name="clock")
def clock_fixture() -> FakeClock:
    """Clock starting inside the window of the sample event."""
    return FakeClock(now=150)


@pytest.fixture(name="client")
def client_fixture(session: Session, clock: FakeClock):
    """Create a test client with the test database session and clock."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_now] = clock
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="sample_event")
def sample_event_fixture(registry: AttendanceRegistry) -> int:
    """Create event 0 with the check-in window [100, 200]."""
    return registry.create_event(ORGANIZER, "Weekly Standup", 100, 200)
