"""
Database engine and session management.

The store handle is an explicitly constructed ``Database`` object: it owns the
SQLAlchemy engine and session factory, is handed to the FastAPI app at
construction time, and is disposed by whoever created it. Tests build a fresh
in-memory SQLite instance per test.
"""
import logging
from typing import Any, Dict, Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dog_catalog.db.models import Base
from dog_catalog.utils import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> Dict[str, Any]:
    if not url.startswith("sqlite"):
        return {}
    kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url or url.rstrip("/").endswith("sqlite://"):
        # In-memory SQLite with StaticPool so the schema persists across connections
        kwargs["poolclass"] = StaticPool
    return kwargs


class Database:
    """Owns one engine and its session factory."""

    def __init__(self, url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None:
            url = url or settings.database_url()
            engine = create_engine(url, **_engine_kwargs(url))
        self.engine = engine
        self.SessionLocal = sessionmaker(autoflush=False, bind=engine)

    @property
    def url(self) -> str:
        return self.engine.url.render_as_string(hide_password=True)

    @property
    def is_sqlite(self) -> bool:
        return self.engine.dialect.name == "sqlite"

    def create_schema(self) -> None:
        """Create tables directly from metadata (dev and test use; production runs Alembic)."""
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        logger.info("database_dispose: url=%s", self.url)
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """Dependency to get a database session from the app-owned Database."""
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
