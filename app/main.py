"""
Main FastAPI application.

This is the entry point for the API server:

    uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging_setup import setup_logging
from app.db.base import Base
from app.db.session import engine
from app.errors import AppError, app_error_handler, validation_error_handler
from app.routers import health, task

# Register models on Base.metadata before create_all
from app.models import Comment, Task  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    - On startup: configure logging, optionally create tables.
    - On shutdown: release pooled connections.
    """
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.DEBUG)
    logger.info("Starting %s...", settings.APP_NAME)

    if settings.AUTO_CREATE_TABLES:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    yield

    logger.info("Shutting down %s...", settings.APP_NAME)
    await engine.dispose()


# Create the FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="API for managing tasks and comments",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

# Include routers (API endpoints)
app.include_router(health.router, tags=["Health"])
app.include_router(task.router)


@app.get("/")
async def root():
    """Service name and version."""
    return {"name": settings.APP_NAME, "version": settings.APP_VERSION}
