"""
Pydantic models for the OAuth proxy endpoints.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class AuthUser(BaseModel):
    """Subset of the GitHub profile handed back to the frontend."""
    id: Optional[int] = None
    login: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None


class AuthorizeURLResponse(BaseModel):
    url: str


class CodeExchangeRequest(BaseModel):
    """Body of the OAuth callback request."""
    code: Optional[str] = None


class TokenResponse(BaseModel):
    """Access token plus the profile of the user who granted it."""
    access_token: str
    token_type: Optional[str] = None
    scope: Optional[str] = None
    user: AuthUser


class VerifyResponse(BaseModel):
    valid: bool
    user: Optional[AuthUser] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime
    github_configured: bool
