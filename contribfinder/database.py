"""
Database setup and models for the Contribution Finder service.
"""

from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import create_engine, Column, String, Integer, DateTime
from sqlalchemy.orm import declarative_base, sessionmaker, Session
import structlog

from .config import settings

logger = structlog.get_logger(__name__)

# Create SQLAlchemy base
Base = declarative_base()


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form SQLite round-trips."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class RepoStarsDB(Base):
    """Cached star count for a repository."""
    __tablename__ = "repo_stars"

    full_name = Column(String(255), primary_key=True)

    # NULL records a failed lookup so it is not retried until it expires
    stargazers_count = Column(Integer, nullable=True)

    fetched_at = Column(DateTime, nullable=False, default=utcnow)


class DatabaseManager:
    """
    Owns the engine and session factory behind the star cache.

    The engine is created lazily so tests can point a manager at a throwaway
    SQLite file; the app-wide instance falls back to ``DATABASE_URL``.
    """

    def __init__(self, database_url: Optional[str] = None, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine = None
        self.SessionLocal = None
        self._initialized = False

    def initialize(self):
        """Create the engine and the ``repo_stars`` table; repeat calls are no-ops."""
        if self._initialized:
            return

        database_url = self.database_url or settings.database_url
        try:
            self.engine = create_engine(
                database_url,
                echo=self.echo,
                pool_pre_ping=True,
            )

            self.SessionLocal = sessionmaker(
                autocommit=False,
                autoflush=False,
                bind=self.engine
            )

            Base.metadata.create_all(bind=self.engine)

            self._initialized = True
            logger.info("Star cache database ready", database_url=database_url)

        except Exception as e:
            logger.error("Failed to open star cache database",
                         database_url=database_url,
                         error=str(e))
            raise

    def get_session(self) -> Session:
        """New session for one cache read or write; callers close it."""
        if not self._initialized:
            self.initialize()

        return self.SessionLocal()

    def close(self):
        """Dispose of pooled connections; the next session reopens them."""
        if self.engine:
            self.engine.dispose()
            self._initialized = False
            logger.info("Star cache database closed")


# Shared by the app lifespan and the default StarCache
db_manager = DatabaseManager(echo=settings.app_debug)

