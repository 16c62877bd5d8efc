"""Tests for settings loading."""

from contribfinder.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GITHUB_CLIENT_ID", raising=False)
    monkeypatch.delenv("GITHUB_CLIENT_SECRET", raising=False)
    monkeypatch.delenv("APP_PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_port == 3002
    assert settings.oauth_scope == "read:user"
    assert settings.search_per_page == 20
    assert settings.star_lookup_limit == 5
    assert settings.github_configured is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_CLIENT_ID", "abc")
    monkeypatch.setenv("GITHUB_CLIENT_SECRET", "shh")
    monkeypatch.setenv("APP_PORT", "4000")

    settings = Settings(_env_file=None)

    assert settings.github_client_id == "abc"
    assert settings.app_port == 4000
    assert settings.github_configured is True


def test_configured_requires_both_credentials():
    assert Settings(_env_file=None, github_client_id="abc", github_client_secret=None).github_configured is False


def test_allowed_origins_are_split():
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
    assert settings.allowed_origins == ["http://a.test", "http://b.test"]
