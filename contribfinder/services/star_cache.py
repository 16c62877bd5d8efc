"""
Database-backed cache of repository star counts.
"""

from datetime import timedelta
from typing import Optional, Tuple
import structlog
from sqlalchemy.exc import IntegrityError

from ..database import DatabaseManager, RepoStarsDB, db_manager, utcnow

logger = structlog.get_logger(__name__)


class StarCache:
    """Star counts keyed by ``owner/name``, fresh for ``ttl_seconds``."""

    def __init__(self, ttl_seconds: int, manager: Optional[DatabaseManager] = None):
        self.ttl = timedelta(seconds=ttl_seconds)
        self.manager = manager or db_manager
        self.manager.initialize()

    def get(self, full_name: str) -> Tuple[bool, Optional[int]]:
        """
        Look up a cached star count.

        Returns:
            ``(hit, count)``. A hit with ``count`` of ``None`` is a cached
            failed lookup.
        """
        db_session = self.manager.get_session()
        try:
            record = db_session.get(RepoStarsDB, full_name)
            if record is None or utcnow() - record.fetched_at > self.ttl:
                return False, None
            return True, record.stargazers_count
        finally:
            db_session.close()

    def put(self, full_name: str, stargazers_count: Optional[int]) -> None:
        """Insert or refresh the cached star count for a repository."""
        db_session = self.manager.get_session()
        try:
            db_session.merge(RepoStarsDB(
                full_name=full_name,
                stargazers_count=stargazers_count,
                fetched_at=utcnow()
            ))
            db_session.commit()
            logger.debug("Cached star count",
                         repository=full_name,
                         stars=stargazers_count)
        except IntegrityError:
            # A concurrent request inserted the same repository first
            db_session.rollback()
            logger.debug("Star count already cached by another request",
                         repository=full_name)
        except Exception as e:
            db_session.rollback()
            logger.error("Failed to cache star count",
                         repository=full_name,
                         error=str(e))
            raise
        finally:
            db_session.close()
