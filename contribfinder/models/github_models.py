"""
Pydantic models for GitHub data returned by the discovery endpoints.
"""

from datetime import date, datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field


SortOption = Literal["created", "updated", "comments", "reactions"]
TrendingPeriod = Literal["daily", "weekly", "monthly"]


class GitHubUser(BaseModel):
    """GitHub user model."""
    login: str
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None


class LabelStyle(BaseModel):
    """Colours used to render a label chip."""
    background_color: str
    color: str
    border: str


class GitHubLabel(BaseModel):
    """GitHub issue label model."""
    name: str
    color: str = "6b7280"
    style: LabelStyle


class RepositoryRef(BaseModel):
    """Repository coordinates derived from an issue's repository URL."""
    owner: str
    name: str
    full_name: str


class IssueSummary(BaseModel):
    """Search result for a single issue."""
    id: int
    number: int
    title: str
    html_url: str
    state: str = "open"
    comments: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_at_display: Optional[str] = None
    user: Optional[GitHubUser] = None
    labels: List[GitHubLabel] = []
    repository: RepositoryRef
    stargazers_count: Optional[int] = None


class IssueSearchFilter(BaseModel):
    """Filter parameters for the beginner issue search."""
    query: str = ""
    language: str = ""
    sort: SortOption = "created"
    labels: List[str] = Field(default_factory=lambda: ["good first issue"])
    categories: List[str] = []
    popularity: str = ""


class IssueSearchResponse(BaseModel):
    """Response model for the issue search endpoint."""
    query: str
    total_count: int = 0
    items: List[IssueSummary] = []


class GitHubRepository(BaseModel):
    """GitHub repository model."""
    id: int
    name: str
    full_name: str
    owner: GitHubUser
    html_url: str
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    topics: List[str] = []


class TrendingResponse(BaseModel):
    """Response model for the trending repositories endpoint."""
    query: str
    period: TrendingPeriod
    since: date
    total_count: int = 0
    items: List[GitHubRepository] = []


class RepoStars(BaseModel):
    """Star count for one repository; ``None`` when the lookup failed."""
    full_name: str
    stargazers_count: Optional[int] = None
    cached: bool = False
