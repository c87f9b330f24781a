"""Database configuration and session management for SQLite.

The registry keeps all of its state (organizer, event counter, events,
attendance flags and emitted notifications) in a single SQLite database so
that it survives process restarts.

SQLite Configuration Choices:
    - **WAL (Write-Ahead Logging)**: Readers are not blocked while a
      registry operation commits. Queries such as attendance lookups keep
      working while a check-in is being written.

    - **Foreign Keys**: Disabled by default in SQLite. Enabled so that an
      Attendance row can only reference an Event that was actually created.

    - **check_same_thread=False**: FastAPI may run a request's dependencies
      and handler on different threads; the session must be usable from
      both.
"""

from sqlalchemy import event as sa_event
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import settings

connect_args = {"check_same_thread": False}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=settings.debug,  # Log SQL statements when DEBUG=true
)


@sa_event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Configure SQLite pragmas on each new connection.

    These settings are connection-level, not database-level, so they must
    be set each time a new connection is established from the pool.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_and_tables():
    """Create all database tables."""
    SQLModel.metadata.create_all(engine)


def get_session():
    """Dependency for getting database session."""
    with Session(engine) as session:
        yield session
