"""
Business logic services for the Contribution Finder service.
"""

from .github_api import GitHubAPIClient
from .oauth_service import OAuthService
from .issue_search_service import IssueSearchService
from .repository_service import RepositoryService
from .star_cache import StarCache

__all__ = [
    "GitHubAPIClient",
    "OAuthService",
    "IssueSearchService",
    "RepositoryService",
    "StarCache"
]
