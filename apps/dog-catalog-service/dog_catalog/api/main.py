"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

from dog_catalog import __version__
from dog_catalog.api.dogs import router as dogs_router
from dog_catalog.api.support import router as support_router
from dog_catalog.db.database import Database
from dog_catalog.utils import settings

# Configure logging
LOG_LEVEL_NAME = settings.log_level_name()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API around ``database``.

    When no database is given the app builds one from DATABASE_URL, creates
    the schema on SQLite, and disposes of it on shutdown. A caller-supplied
    database stays owned by the caller.
    """
    owns_database = database is None
    if database is None:
        database = Database()
        if database.is_sqlite:
            database.create_schema()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("app_startup: log_level=%s database=%s", LOG_LEVEL_NAME, database.url)
        try:
            yield
        finally:
            if owns_database:
                database.dispose()

    app = FastAPI(
        title="Dog Catalog Service",
        description="API for browsing and managing dog profiles.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def log_validation_error(request: Request, exc: RequestValidationError):
        logger.warning(
            "request_rejected: method=%s path=%s errors=%d",
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return await request_validation_exception_handler(request, exc)

    app.include_router(support_router)
    app.include_router(dogs_router)
    return app
