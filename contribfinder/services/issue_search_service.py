"""
Beginner-friendly issue search across all of GitHub.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
import structlog
from fastapi.concurrency import run_in_threadpool

from ..config import Settings
from ..models.github_models import (
    GitHubLabel, GitHubUser, IssueSearchFilter, IssueSearchResponse, IssueSummary
)
from ..presentation import format_ist, label_style, repo_info_from_url
from .github_api import GitHubAPIClient
from .query_builder import build_issue_query
from .repository_service import RepositoryService

logger = structlog.get_logger(__name__)


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class IssueSearchService:
    """Searches GitHub issues using the beginner filter vocabulary."""

    def __init__(
        self,
        settings: Settings,
        api_client: GitHubAPIClient,
        repository_service: Optional[RepositoryService] = None
    ):
        self.settings = settings
        self.api_client = api_client
        self.repository_service = repository_service

    def _convert_issue(self, item: Dict[str, Any]) -> IssueSummary:
        """Convert a search result item to our model."""
        created_at = _parse_timestamp(item.get("created_at"))
        user = item.get("user")

        return IssueSummary(
            id=item["id"],
            number=item["number"],
            title=item["title"],
            html_url=item["html_url"],
            state=item.get("state", "open"),
            comments=item.get("comments", 0),
            created_at=created_at,
            updated_at=_parse_timestamp(item.get("updated_at")),
            created_at_display=format_ist(created_at),
            user=GitHubUser(
                login=user["login"],
                avatar_url=user.get("avatar_url"),
                html_url=user.get("html_url")
            ) if user else None,
            labels=[
                GitHubLabel(
                    name=label["name"],
                    color=label.get("color") or "6b7280",
                    style=label_style(label.get("color"))
                )
                for label in item.get("labels", [])
            ],
            repository=repo_info_from_url(item.get("repository_url"))
        )

    async def search(
        self,
        filters: IssueSearchFilter,
        token: Optional[str] = None,
        with_stars: bool = False
    ) -> IssueSearchResponse:
        """
        Search open issues matching the filters, newest first by default.

        Args:
            filters: Selected labels, language, categories, popularity and text
            token: Caller's GitHub access token, if signed in
            with_stars: Attach star counts for the first few repositories

        Returns:
            IssueSearchResponse with one page of results
        """
        query = build_issue_query(filters)

        data = await self.api_client.search_issues(
            query,
            sort=filters.sort,
            per_page=self.settings.search_per_page,
            token=token
        )
        issues = [self._convert_issue(item) for item in data.get("items") or []]

        if with_stars and self.repository_service and issues:
            await self._attach_stars(issues, token)

        logger.info("Fetched issues",
                    count=len(issues),
                    total=data.get("total_count") or 0,
                    sort=filters.sort,
                    authenticated=bool(token))

        return IssueSearchResponse(
            query=query,
            total_count=data.get("total_count") or 0,
            items=issues
        )

    async def _attach_stars(self, issues: List[IssueSummary], token: Optional[str]) -> None:
        """Fill in star counts for repositories of the leading issues."""
        leading = issues[:self.settings.star_lookup_limit]
        names = [issue.repository.full_name for issue in leading]
        stars = await run_in_threadpool(self.repository_service.get_stars_bulk, names, token)

        counts = {entry.full_name: entry.stargazers_count for entry in stars}
        for issue in issues:
            issue.stargazers_count = counts.get(issue.repository.full_name)
