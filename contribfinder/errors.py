"""
Exceptions shared by the services and API routes.
"""

from typing import Any, Optional


RATE_LIMIT_MESSAGE = (
    "(403) Rate limit exceeded! GitHub allows 10 requests/minute for "
    "unauthenticated users. Sign in with GitHub to get 5,000 requests/hour."
)


class APIError(Exception):
    """Error rendered to the client as ``{"error": message, **extra}``."""

    def __init__(self, status_code: int, message: str, **extra: Any):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.extra = extra

    def to_dict(self) -> dict:
        return {**self.extra, "error": self.message}


class GitHubAPIError(Exception):
    """Non-2xx response from the GitHub REST API."""

    def __init__(self, status_code: int, message: str, body: Optional[Any] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.body = body


class RateLimitError(GitHubAPIError):
    """GitHub refused the call because the caller is rate limited."""

    def __init__(self, message: str = RATE_LIMIT_MESSAGE, body: Optional[Any] = None):
        super().__init__(403, message, body)


class OAuthConfigError(Exception):
    """OAuth app credentials are missing from the server configuration."""


class OAuthExchangeError(Exception):
    """GitHub rejected the authorization code."""
