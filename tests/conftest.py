"""Shared pytest fixtures and configuration."""

from types import SimpleNamespace

import httpx
import pytest
import requests
from fastapi.testclient import TestClient
from github import UnknownObjectException

from contribfinder.api.auth_routes import get_oauth_service
from contribfinder.api.explore_routes import (
    get_issue_search_service, get_repository_service, get_star_cache
)
from contribfinder.config import Settings, get_settings
from contribfinder.database import DatabaseManager
from contribfinder.main import app
from contribfinder.services.github_api import GitHubAPIClient
from contribfinder.services.issue_search_service import IssueSearchService
from contribfinder.services.oauth_service import OAuthService
from contribfinder.services.repository_service import RepositoryService
from contribfinder.services.star_cache import StarCache


class GitHubStub:
    """
    Stands in for github.com and api.github.com behind an httpx MockTransport.

    Responses are registered per (method, path); every request is recorded.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, status=200, json=None, fail=False):
        self.routes[(method, path)] = (status, json, fail)

    def handler(self, request):
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Not Found"})
        status, body, fail = self.routes[key]
        if fail:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(status, json=body)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)

    def last(self, path):
        return [request for request in self.requests if request.url.path == path][-1]


class FakePage:
    """Minimal PaginatedList: one page plus a total count."""

    def __init__(self, items, total_count):
        self.items = items
        self.totalCount = total_count

    def get_page(self, page):
        return self.items if page == 0 else []


class FakeGithub:
    """Stands in for a PyGithub client; ``factory`` records the token used."""

    def __init__(self):
        self.repos = {}
        self.search_results = []
        self.total_count = 0
        self.error = None
        self.tokens = []
        self.queries = []
        self.repo_lookups = []
        self.unreachable = set()

    def factory(self, token):
        self.tokens.append(token)
        return self

    def search_repositories(self, query, sort, order):
        self.queries.append((query, sort, order))
        if self.error:
            raise self.error
        return FakePage(self.search_results, self.total_count)

    def get_repo(self, full_name):
        self.repo_lookups.append(full_name)
        if full_name in self.unreachable:
            raise requests.exceptions.ConnectionError("Max retries exceeded with url: /repos/" + full_name)
        if full_name not in self.repos:
            raise UnknownObjectException(404, {"message": "Not Found"}, {})
        return SimpleNamespace(full_name=full_name, stargazers_count=self.repos[full_name])


def make_repo(full_name="octo/demo", stars=120, **overrides):
    owner, name = full_name.split("/")
    fields = dict(
        id=1001,
        name=name,
        full_name=full_name,
        owner=SimpleNamespace(
            login=owner,
            avatar_url=f"https://avatars.example/{owner}.png",
            html_url=f"https://github.com/{owner}"
        ),
        html_url=f"https://github.com/{full_name}",
        description="A demo repository",
        language="Python",
        stargazers_count=stars,
        forks_count=7,
        open_issues_count=3,
        topics=["cli"],
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def make_issue_item(issue_id=1, repo="octo/demo", labels=None, **overrides):
    item = {
        "id": issue_id,
        "number": issue_id * 10,
        "title": f"Fix typo #{issue_id}",
        "html_url": f"https://github.com/{repo}/issues/{issue_id * 10}",
        "repository_url": f"https://api.github.com/repos/{repo}",
        "state": "open",
        "comments": 2,
        "created_at": "2024-01-05T09:34:00Z",
        "updated_at": "2024-01-06T10:00:00Z",
        "user": {"login": "newcomer", "avatar_url": "https://avatars.example/newcomer.png"},
        "labels": labels if labels is not None else [{"name": "good first issue", "color": "7057ff"}],
    }
    item.update(overrides)
    return item


@pytest.fixture
def test_settings(tmp_path):
    """Settings with OAuth credentials and a throwaway database."""
    return Settings(
        _env_file=None,
        github_client_id="test-client-id",
        github_client_secret="test-client-secret",
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
    )


@pytest.fixture
def unconfigured_settings(tmp_path):
    """Settings without any OAuth credentials."""
    return Settings(
        _env_file=None,
        github_client_id=None,
        github_client_secret=None,
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
    )


@pytest.fixture
def github_stub():
    return GitHubStub()


@pytest.fixture
def fake_github():
    return FakeGithub()


@pytest.fixture
def star_cache(test_settings):
    manager = DatabaseManager(test_settings.database_url)
    yield StarCache(test_settings.star_cache_ttl, manager)
    manager.close()


@pytest.fixture
def repository_service(test_settings, star_cache, fake_github):
    return RepositoryService(test_settings, star_cache, github_factory=fake_github.factory)


@pytest.fixture
def client(test_settings, github_stub, star_cache, repository_service):
    """FastAPI test client wired to the stubs instead of GitHub."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_oauth_service] = (
        lambda: OAuthService(test_settings, transport=github_stub.transport)
    )
    app.dependency_overrides[get_star_cache] = lambda: star_cache
    app.dependency_overrides[get_repository_service] = lambda: repository_service
    app.dependency_overrides[get_issue_search_service] = lambda: IssueSearchService(
        test_settings,
        GitHubAPIClient(test_settings, transport=github_stub.transport),
        repository_service
    )

    yield TestClient(app)

    app.dependency_overrides.clear()
