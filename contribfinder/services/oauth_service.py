"""
GitHub OAuth web-flow proxy.

The browser never sees the client secret:
1. Frontend asks for the authorize URL and redirects the user to GitHub
2. GitHub redirects back to the frontend with an authorization code
3. Frontend posts the code here
4. The code is exchanged for an access token using the secret
5. Token and user profile are returned to the frontend, which keeps them

Nothing is stored server-side; every call is independent.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote
import structlog
import httpx
from httpx import AsyncClient

from ..config import Settings
from ..errors import OAuthConfigError, OAuthExchangeError
from ..models.auth_models import AuthUser, TokenResponse
from .github_api import GitHubAPIClient

logger = structlog.get_logger(__name__)


def to_auth_user(data: Dict[str, Any]) -> AuthUser:
    """Keep only the profile fields the frontend displays."""
    return AuthUser(
        id=data.get("id"),
        login=data.get("login"),
        name=data.get("name"),
        avatar_url=data.get("avatar_url")
    )


class OAuthService:
    """Builds authorize URLs, exchanges codes and verifies tokens."""

    def __init__(
        self,
        settings: Settings,
        api_client: Optional[GitHubAPIClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = settings
        self.oauth_base_url = settings.github_oauth_base_url.rstrip("/")
        self.transport = transport
        self.api_client = api_client or GitHubAPIClient(settings, transport=transport)

    def build_authorize_url(self, redirect_uri: Optional[str] = None) -> str:
        """
        URL of GitHub's consent page for this OAuth app.

        Raises:
            OAuthConfigError: No client ID is configured.
        """
        client_id = self.settings.github_client_id
        if not client_id:
            raise OAuthConfigError("Server configuration error: GITHUB_CLIENT_ID not set")

        url = (
            f"{self.oauth_base_url}/authorize"
            f"?client_id={client_id}&scope={self.settings.oauth_scope}"
        )
        if redirect_uri:
            url += f"&redirect_uri={quote(redirect_uri, safe='')}"
        return url

    async def _request_access_token(self, code: str) -> Dict[str, Any]:
        async with AsyncClient(timeout=self.settings.request_timeout,
                               transport=self.transport) as client:
            response = await client.post(
                f"{self.oauth_base_url}/access_token",
                headers={
                    "Content-Type": "application/json",
                    "Accept": "application/json"
                },
                json={
                    "client_id": self.settings.github_client_id,
                    "client_secret": self.settings.github_client_secret,
                    "code": code
                }
            )
        return response.json()

    async def exchange_code(self, code: str) -> TokenResponse:
        """
        Exchange an authorization code for an access token and its user.

        Raises:
            OAuthConfigError: Client ID or secret is missing.
            OAuthExchangeError: GitHub rejected the code.
        """
        if not self.settings.github_configured:
            raise OAuthConfigError("Server configuration error: GitHub credentials not set")

        token_data = await self._request_access_token(code)

        if token_data.get("error"):
            logger.error("GitHub OAuth error",
                         error=token_data.get("error"),
                         description=token_data.get("error_description"))
            raise OAuthExchangeError(
                token_data.get("error_description") or "Failed to exchange code for token"
            )

        access_token = token_data["access_token"]
        user_data = await self.api_client.get_authenticated_user(access_token)
        user = to_auth_user(user_data)

        logger.info("OAuth code exchanged", login=user.login, scope=token_data.get("scope"))

        return TokenResponse(
            access_token=access_token,
            token_type=token_data.get("token_type"),
            scope=token_data.get("scope"),
            user=user
        )

    async def verify_token(self, token: str) -> AuthUser:
        """
        Profile of the token's owner; fails if GitHub no longer accepts it.

        Raises:
            GitHubAPIError: GitHub rejected the token.
            httpx.HTTPError: GitHub could not be reached.
        """
        user_data = await self.api_client.get_authenticated_user(token)
        return to_auth_user(user_data)
