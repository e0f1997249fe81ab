"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT  # Environment must be imported first
from .. import __version__
from ..config.cors import CORS_CONFIG
from ..utils.logging_config import setup_logging
from ..db import Database
from .errors import register_error_handlers
from .routes import events, health

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    try:
        app.state.database.ensure_tables_exist()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise
    yield
    # Shutdown
    app.state.database.dispose()

def create_application(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Database the handlers use. Built from the environment
                  when not given.
    """
    app = FastAPI(
        title="Sports Events API",
        description="API for scheduling and managing sporting events",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )
    app.state.database = database or Database()

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    register_error_handlers(app)

    # Include health check router without prefix
    app.include_router(health.router)

    # Include routers with prefix
    app.include_router(events.router, prefix="/api")

    return app

# Create the application instance
app = create_application()
