"""
GitHub repository lookups: trending repositories and star counts.
"""

from datetime import date, datetime, timezone
from typing import Callable, List, Optional
import requests
import structlog
from github import Auth, Github, GithubException, RateLimitExceededException
from github.Repository import Repository

from ..config import Settings
from ..errors import RateLimitError
from ..models.github_models import (
    GitHubRepository, GitHubUser, RepoStars, TrendingPeriod, TrendingResponse
)
from .query_builder import build_trending_query, trending_since
from .star_cache import StarCache

logger = structlog.get_logger(__name__)

GithubFactory = Callable[[Optional[str]], Github]


class RepositoryService:
    """Service for repository-level GitHub queries."""

    def __init__(
        self,
        settings: Settings,
        star_cache: StarCache,
        github_factory: Optional[GithubFactory] = None
    ):
        self.settings = settings
        self.star_cache = star_cache
        self.github_factory = github_factory or self._make_github

    def _make_github(self, token: Optional[str]) -> Github:
        """PyGithub client acting as the caller, or anonymously without a token."""
        return Github(
            auth=Auth.Token(token) if token else None,
            base_url=self.settings.github_api_base_url,
            timeout=int(self.settings.request_timeout),
            per_page=self.settings.search_per_page,
            # Fail fast instead of sleeping until the rate limit resets
            retry=None
        )

    def _convert_repository(self, github_repo: Repository) -> GitHubRepository:
        """Convert GitHub repository object to our model."""
        owner = github_repo.owner
        return GitHubRepository(
            id=github_repo.id,
            name=github_repo.name,
            full_name=github_repo.full_name,
            owner=GitHubUser(
                login=owner.login,
                avatar_url=owner.avatar_url,
                html_url=owner.html_url
            ),
            html_url=github_repo.html_url,
            description=github_repo.description,
            language=github_repo.language,
            stargazers_count=github_repo.stargazers_count,
            forks_count=github_repo.forks_count,
            open_issues_count=github_repo.open_issues_count,
            topics=list(github_repo.topics or [])
        )

    def get_trending(
        self,
        period: TrendingPeriod,
        language: Optional[str] = None,
        token: Optional[str] = None,
        today: Optional[date] = None
    ) -> TrendingResponse:
        """
        Most-starred repositories created within the period.

        Args:
            period: "daily", "weekly" or "monthly"
            language: Optional repository language filter
            token: Caller's GitHub access token, if signed in
            today: End of the window; defaults to the current UTC date

        Returns:
            TrendingResponse with at most ``search_per_page`` repositories

        Raises:
            RateLimitError: GitHub refused the search with 403.
            GithubException: Any other GitHub failure.
        """
        today = today or datetime.now(timezone.utc).date()
        query = build_trending_query(period, language, today)

        try:
            results = self.github_factory(token).search_repositories(
                query=query, sort="stars", order="desc"
            )
            repos = [self._convert_repository(repo) for repo in results.get_page(0)]
            total_count = results.totalCount
        except GithubException as e:
            if isinstance(e, RateLimitExceededException) or e.status == 403:
                logger.warning("Rate limited searching trending repos", query=query)
                raise RateLimitError() from e
            logger.error("GitHub API error", error=str(e), query=query)
            raise

        logger.info("Fetched trending repositories",
                    period=period,
                    language=language,
                    count=len(repos),
                    total=total_count)

        return TrendingResponse(
            query=query,
            period=period,
            since=trending_since(period, today),
            total_count=total_count,
            items=repos
        )

    def get_stars(self, full_name: str, token: Optional[str] = None) -> RepoStars:
        """
        Star count for ``owner/name``, served from cache while fresh.

        A failed lookup is cached as ``None`` so it is not retried until the
        entry expires.
        """
        hit, count = self.star_cache.get(full_name)
        if hit:
            return RepoStars(full_name=full_name, stargazers_count=count, cached=True)

        try:
            count = self.github_factory(token).get_repo(full_name).stargazers_count
        except GithubException as e:
            logger.warning("Failed to fetch repository stars",
                           repository=full_name,
                           status=e.status)
            count = None
        except requests.exceptions.RequestException as e:
            logger.warning("GitHub unreachable fetching repository stars",
                           repository=full_name,
                           error=str(e),
                           error_type=type(e).__name__)
            count = None

        self.star_cache.put(full_name, count)
        return RepoStars(full_name=full_name, stargazers_count=count, cached=False)

    def get_stars_bulk(
        self,
        full_names: List[str],
        token: Optional[str] = None
    ) -> List[RepoStars]:
        """Star counts for the first ``star_lookup_limit`` unique repositories."""
        unique = list(dict.fromkeys(full_names))[:self.settings.star_lookup_limit]
        return [self.get_stars(name, token) for name in unique]
