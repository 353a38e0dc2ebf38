"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tagblaze.config import get_settings
from tagblaze.infrastructure.database import engine, Base
from tagblaze.core.logging import configure_logging
from tagblaze.core.middleware import setup_middleware
from tagblaze.core.exceptions import AppError, global_exception_handler

# Import all models so SQLAlchemy knows about them
from tagblaze.domain.models.user import User
from tagblaze.domain.models.ticket import Ticket
from tagblaze.domain.models.tag import Tag
from tagblaze.domain.models.ticket_tag import TicketTag

# Import routers
from tagblaze.interfaces.api.auth import router as auth_router
from tagblaze.interfaces.api.tickets import router as tickets_router
from tagblaze.interfaces.api.tags import router as tags_router
from tagblaze.interfaces.api.relations import router as relations_router
from tagblaze.interfaces.api.admin import router as admin_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting TagBlaze", env=settings.ENVIRONMENT)

    # Create DB tables (dev only — use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    engine.dispose()
    logger.info("TagBlaze stopped")


app = FastAPI(
    title="TagBlaze",
    description="Ticket tracking API — tickets, tags and role-based access",
    version="1.0.0",
    lifespan=lifespan,
)

# Correlation ID + request logging
setup_middleware(app)

# AppError is mapped by ExceptionMiddleware; anything else falls through to
# the catch-all, which answers with a generic 500.
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Added last, so it runs first on every request
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(tickets_router)
app.include_router(tags_router)
app.include_router(relations_router)
app.include_router(admin_router)


@app.get("/")
def root():
    return {
        "name": "TagBlaze",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
