"""
Issue discovery routes: filter options, issue search, trending repos and stars.
"""

from typing import List, Optional
import structlog
from fastapi import APIRouter, Depends, Header, Query

from ..catalog import DEFAULT_LABELS, get_catalog
from ..config import Settings, get_settings
from ..errors import APIError, RATE_LIMIT_MESSAGE, RateLimitError
from ..models.catalog_models import FilterCatalog
from ..models.github_models import (
    IssueSearchFilter, IssueSearchResponse, RepoStars, SortOption,
    TrendingPeriod, TrendingResponse
)
from ..services.github_api import GitHubAPIClient
from ..services.issue_search_service import IssueSearchService
from ..services.repository_service import RepositoryService
from ..services.star_cache import StarCache
from .auth_routes import extract_bearer_token

logger = structlog.get_logger(__name__)
router = APIRouter()


def get_star_cache(settings: Settings = Depends(get_settings)) -> StarCache:
    return StarCache(settings.star_cache_ttl)


def get_repository_service(
    settings: Settings = Depends(get_settings),
    star_cache: StarCache = Depends(get_star_cache)
) -> RepositoryService:
    return RepositoryService(settings, star_cache)


def get_issue_search_service(
    settings: Settings = Depends(get_settings),
    repository_service: RepositoryService = Depends(get_repository_service)
) -> IssueSearchService:
    return IssueSearchService(settings, GitHubAPIClient(settings), repository_service)


def get_caller_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """Signed-in users search with their own token and rate limit."""
    return extract_bearer_token(authorization)


def _validate_full_name(full_name: str) -> None:
    owner, _, name = full_name.partition("/")
    if not owner or not name or "/" in name:
        raise APIError(400, "Repository name must be in format 'owner/repo'")


@router.get("/options", response_model=FilterCatalog)
async def get_filter_options():
    """Get every filter option the search and trending endpoints accept."""
    return get_catalog()


@router.get("/issues", response_model=IssueSearchResponse)
async def search_issues(
    q: str = Query("", description="Free-text search terms"),
    language: str = Query("", description="Repository language, e.g. python"),
    sort: SortOption = Query("created", description="Sort by: created, updated, comments, reactions"),
    labels: Optional[List[str]] = Query(None, description="Labels, any of which must match"),
    categories: List[str] = Query([], description="Category keyword groups"),
    popularity: str = Query("", description="Star qualifier, e.g. stars:>100"),
    with_stars: bool = Query(False, description="Attach star counts for the leading repositories"),
    token: Optional[str] = Depends(get_caller_token),
    search_service: IssueSearchService = Depends(get_issue_search_service)
):
    """Search open beginner-friendly issues across GitHub."""
    filters = IssueSearchFilter(
        query=q,
        language=language,
        sort=sort,
        labels=DEFAULT_LABELS if labels is None else labels,
        categories=categories,
        popularity=popularity
    )

    try:
        return await search_service.search(filters, token=token, with_stars=with_stars)
    except RateLimitError:
        raise APIError(403, RATE_LIMIT_MESSAGE)
    except Exception as e:
        logger.error("Failed to search issues", error=str(e), error_type=type(e).__name__)
        raise APIError(502, "Failed to fetch issues. Please try again.")


@router.get("/trending", response_model=TrendingResponse)
def get_trending_repositories(
    period: TrendingPeriod = Query("weekly", description="daily, weekly or monthly"),
    language: str = Query("", description="Repository language, e.g. rust"),
    token: Optional[str] = Depends(get_caller_token),
    repository_service: RepositoryService = Depends(get_repository_service)
):
    """Get the most-starred repositories created within the period."""
    try:
        return repository_service.get_trending(period, language=language, token=token)
    except RateLimitError:
        raise APIError(403, RATE_LIMIT_MESSAGE)
    except Exception as e:
        logger.error("Failed to fetch trending repos", error=str(e), error_type=type(e).__name__)
        raise APIError(502, "Failed to fetch trending repos. Please try again.")


@router.get("/repos/stars", response_model=List[RepoStars])
def get_stars_bulk(
    repos: List[str] = Query(..., description="Repositories as owner/repo"),
    token: Optional[str] = Depends(get_caller_token),
    repository_service: RepositoryService = Depends(get_repository_service)
):
    """Get star counts for several repositories, capped at the lookup limit."""
    for full_name in repos:
        _validate_full_name(full_name)

    return repository_service.get_stars_bulk(repos, token=token)


@router.get("/repos/{owner}/{name}/stars", response_model=RepoStars)
def get_repository_stars(
    owner: str,
    name: str,
    token: Optional[str] = Depends(get_caller_token),
    repository_service: RepositoryService = Depends(get_repository_service)
):
    """Get the star count for one repository."""
    return repository_service.get_stars(f"{owner}/{name}", token=token)
