"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, bg_remover.api, bg_remover.observability, bg_remover.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bg_remover.api import api_router
from bg_remover.api.error_handling import register_exception_handlers
from bg_remover.boundary.db.connection import dispose_engine
from bg_remover.boundary.db.create_tables import create_all_tables
from bg_remover.configs import Settings, get_settings
from bg_remover.observability.logger import configure_logging
from bg_remover.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, optionally creates tables, and disposes the
    connection pool on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured", extra={"environment": settings.environment})

    if settings.database.create_tables_on_startup:
        await create_all_tables()

    yield

    await dispose_engine()
    logger.info("Application shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to build the app from; defaults to get_settings()

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Background Remover API",
        description="Tracks background removal jobs for authenticated users",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware, user_header=settings.auth.user_header)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bg_remover.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )
