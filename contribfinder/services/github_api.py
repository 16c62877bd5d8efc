"""
Thin async client for the GitHub REST API.
"""

from typing import Any, Dict, Optional
import structlog
import httpx
from httpx import AsyncClient

from ..config import Settings
from ..errors import GitHubAPIError, RateLimitError

logger = structlog.get_logger(__name__)

GITHUB_V3_ACCEPT = "application/vnd.github.v3+json"


class GitHubAPIClient:
    """Makes single, unretried requests to api.github.com on a caller's behalf."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = settings.github_api_base_url.rstrip("/")
        self.timeout = settings.request_timeout
        self.transport = transport

    def _headers(self, token: Optional[str]) -> Dict[str, str]:
        headers = {"Accept": GITHUB_V3_ACCEPT}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        token: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Make an HTTP request to the GitHub API and return the decoded JSON.

        Raises:
            RateLimitError: GitHub answered 403.
            GitHubAPIError: Any other non-2xx answer.
            httpx.HTTPError: The request itself failed.
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        logger.info("Making GitHub API request",
                    method=method,
                    endpoint=endpoint,
                    authenticated=bool(token))

        async with AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.request(
                method=method,
                url=url,
                headers=self._headers(token),
                params=params
            )

        logger.info("GitHub API response",
                    endpoint=endpoint,
                    status_code=response.status_code)

        if response.is_success:
            return response.json()

        if response.status_code == 403:
            logger.warning("GitHub API rate limit exceeded",
                           endpoint=endpoint,
                           remaining=response.headers.get("x-ratelimit-remaining"))
            raise RateLimitError(body=response.text)

        raise GitHubAPIError(
            response.status_code,
            f"GitHub API error: {response.status_code}",
            body=response.text
        )

    async def get_authenticated_user(self, token: str) -> Dict[str, Any]:
        """Profile of the user that owns ``token``."""
        return await self._make_request("GET", "/user", token=token)

    async def search_issues(
        self,
        query: str,
        sort: str,
        per_page: int,
        token: Optional[str] = None,
        order: str = "desc"
    ) -> Dict[str, Any]:
        """Run an issue search and return the raw result page."""
        return await self._make_request(
            "GET",
            "/search/issues",
            token=token,
            params={"q": query, "sort": sort, "order": order, "per_page": per_page}
        )
