"""
GitHub OAuth proxy routes.
"""

from typing import Optional
import structlog
from fastapi import APIRouter, Depends, Header, Query

from ..config import Settings, get_settings
from ..errors import APIError, GitHubAPIError, OAuthConfigError, OAuthExchangeError
from ..models.auth_models import (
    AuthorizeURLResponse, CodeExchangeRequest, TokenResponse, VerifyResponse
)
from ..services.oauth_service import OAuthService

logger = structlog.get_logger(__name__)
router = APIRouter()


# Dependency to get OAuth service
def get_oauth_service(settings: Settings = Depends(get_settings)) -> OAuthService:
    return OAuthService(settings)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Token from an ``Authorization: Bearer <token>`` header, else None."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization.split(" ")[1] or None


@router.get("/auth/github", response_model=AuthorizeURLResponse)
async def github_login(
    redirect_uri: Optional[str] = Query(None, description="Where GitHub sends the user back"),
    oauth_service: OAuthService = Depends(get_oauth_service)
):
    """Return the GitHub authorize URL for the frontend to redirect to."""
    logger.info("Login requested", redirect_uri=redirect_uri)

    try:
        url = oauth_service.build_authorize_url(redirect_uri)
    except OAuthConfigError as e:
        logger.error("OAuth app not configured", error=str(e))
        raise APIError(500, str(e))

    return AuthorizeURLResponse(url=url)


@router.post("/auth/github/callback", response_model=TokenResponse)
async def github_callback(
    payload: Optional[CodeExchangeRequest] = None,
    oauth_service: OAuthService = Depends(get_oauth_service)
):
    """Exchange the authorization code for an access token."""
    code = payload.code if payload else None
    if not code:
        raise APIError(400, "Authorization code is required")

    try:
        return await oauth_service.exchange_code(code)
    except OAuthConfigError as e:
        logger.error("OAuth app not configured", error=str(e))
        raise APIError(500, str(e))
    except OAuthExchangeError as e:
        raise APIError(400, str(e))
    except Exception as e:
        logger.error("OAuth callback failed", error=str(e), error_type=type(e).__name__)
        raise APIError(500, "Failed to authenticate with GitHub")


@router.get("/auth/verify", response_model=VerifyResponse)
async def verify_token(
    authorization: Optional[str] = Header(None),
    oauth_service: OAuthService = Depends(get_oauth_service)
):
    """Check whether an access token is still accepted by GitHub."""
    token = extract_bearer_token(authorization)
    if not token:
        raise APIError(401, "No token provided", valid=False)

    try:
        user = await oauth_service.verify_token(token)
    except GitHubAPIError as e:
        logger.info("Token rejected by GitHub", status_code=e.status_code)
        return VerifyResponse(valid=False, error="Token expired or invalid")
    except Exception as e:
        logger.error("Token verification failed", error=str(e), error_type=type(e).__name__)
        raise APIError(500, "Failed to verify token", valid=False)

    return VerifyResponse(valid=True, user=user)
