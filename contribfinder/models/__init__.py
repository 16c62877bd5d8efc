"""
Pydantic models for the Contribution Finder service.
"""

from .github_models import (
    GitHubRepository, GitHubUser, IssueSearchFilter, IssueSearchResponse,
    IssueSummary, RepoStars, TrendingResponse
)
from .auth_models import AuthUser, TokenResponse, VerifyResponse
from .catalog_models import FilterCatalog

__all__ = [
    "GitHubRepository",
    "GitHubUser",
    "IssueSearchFilter",
    "IssueSearchResponse",
    "IssueSummary",
    "RepoStars",
    "TrendingResponse",
    "AuthUser",
    "TokenResponse",
    "VerifyResponse",
    "FilterCatalog"
]
