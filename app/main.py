"""Attendance Registry Web Application."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.core.config import settings
from app.core.database import create_db_and_tables, engine
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
from app.registry.service import initialize_registry
from app.routes import events, organizer

# Configure logging
log_dir = settings.log_dir
log_dir.mkdir(parents=True, exist_ok=True)
log_file = log_dir / "latest.log"

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    filename=str(log_file),
)
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    Unauthorized: 403,
    InvalidTimeRange: 400,
    InvalidAddress: 400,
    EventNotFound: 404,
    OutsideCheckInWindow: 409,
    AlreadyCheckedIn: 409,
    RegistryNotInitialized: 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    # Startup
    logger.info("Starting Attendance Registry application")
    create_db_and_tables()
    with Session(engine) as session:
        initialize_registry(session, settings.organizer)
    yield
    # Shutdown
    logger.info("Attendance Registry application shut down")


app = FastAPI(
    title=settings.app_name,
    description="Organizer-managed events with one-time, time-windowed attendee check-in",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for external access
origins = (
    ["*"]
    if settings.allowed_origins == "*"
    else [o.strip() for o in settings.allowed_origins.split(",")]
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(events.router)
app.include_router(organizer.router)


@app.exception_handler(RegistryError)
async def registry_error_handler(request: Request, exc: RegistryError):
    """Report a rejected registry operation with its error name and context."""
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(type(exc), 400),
        content={"error": exc.name, "operation": exc.operation, "detail": exc.detail},
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}
