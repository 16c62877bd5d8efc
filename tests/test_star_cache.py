"""Tests for the database-backed star cache."""

from datetime import timedelta
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from contribfinder.database import RepoStarsDB, utcnow


def test_miss_when_empty(star_cache):
    assert star_cache.get("octo/demo") == (False, None)


def test_put_then_get(star_cache):
    star_cache.put("octo/demo", 42)

    assert star_cache.get("octo/demo") == (True, 42)


def test_failed_lookup_is_cached_as_none(star_cache):
    star_cache.put("octo/gone", None)

    assert star_cache.get("octo/gone") == (True, None)


def test_put_overwrites(star_cache):
    star_cache.put("octo/demo", 1)
    star_cache.put("octo/demo", 2)

    assert star_cache.get("octo/demo") == (True, 2)


def test_expired_entry_is_a_miss(star_cache):
    db_session = star_cache.manager.get_session()
    db_session.add(RepoStarsDB(
        full_name="octo/old",
        stargazers_count=5,
        fetched_at=utcnow() - star_cache.ttl - timedelta(seconds=1)
    ))
    db_session.commit()
    db_session.close()

    assert star_cache.get("octo/old") == (False, None)


def test_put_tolerates_concurrent_insert(star_cache, monkeypatch):
    db_session = Mock()
    db_session.commit.side_effect = IntegrityError(
        "INSERT INTO repo_stars", {}, Exception("UNIQUE constraint failed: repo_stars.full_name")
    )
    monkeypatch.setattr(star_cache.manager, "get_session", lambda: db_session)

    star_cache.put("octo/demo", 3)

    db_session.rollback.assert_called_once()
    db_session.close.assert_called_once()


def test_put_propagates_other_database_errors(star_cache, monkeypatch):
    db_session = Mock()
    db_session.commit.side_effect = OperationalError("INSERT INTO repo_stars", {}, Exception("disk I/O error"))
    monkeypatch.setattr(star_cache.manager, "get_session", lambda: db_session)

    with pytest.raises(OperationalError):
        star_cache.put("octo/demo", 3)

    db_session.rollback.assert_called_once()
