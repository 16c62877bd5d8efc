"""
Display helpers shared by the issue and repository converters.
"""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from .models.github_models import LabelStyle, RepositoryRef

IST = ZoneInfo("Asia/Kolkata")
DEFAULT_LABEL_COLOR = "6b7280"


def repo_info_from_url(repository_url: Optional[str]) -> RepositoryRef:
    """Owner and name from the last two segments of a repository API URL."""
    parts = (repository_url or "").rstrip("/").split("/")
    owner = parts[-2] if len(parts) >= 2 else ""
    name = parts[-1]
    return RepositoryRef(owner=owner, name=name, full_name=f"{owner}/{name}")


def label_style(color: Optional[str]) -> LabelStyle:
    """Translucent background and border derived from a label's hex colour."""
    color = color or DEFAULT_LABEL_COLOR
    return LabelStyle(
        background_color=f"#{color}20",
        color=f"#{color}",
        border=f"1px solid #{color}40",
    )


def format_ist(value: Optional[datetime]) -> Optional[str]:
    """
    Format a timestamp in Indian Standard Time, e.g. ``5 Jan 2024, 3:04 pm IST``.

    Naive datetimes are taken to be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(IST)
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{local.day} {local:%b %Y}, {hour}:{local:%M} {meridiem} IST"
