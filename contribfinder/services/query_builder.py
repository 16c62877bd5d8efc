"""
GitHub search query construction for issue and trending searches.

GitHub search syntax used here:
- is:issue is:open - open issues only, no pull requests
- label:"good first issue" - has the label; several labels in parentheses
  match any of them
- language:python - repository language
- (a OR b) - free-text keywords, any of them
- stars:>100 - repository popularity
- created:>2024-01-01 - repositories created after a date
"""

import calendar
from datetime import date, timedelta
from typing import Optional

from ..models.github_models import IssueSearchFilter, TrendingPeriod


def build_issue_query(filters: IssueSearchFilter) -> str:
    """Build the /search/issues query string from the selected filters."""
    query_parts = ["is:issue is:open"]

    labels = [label for label in filters.labels if label]
    if labels:
        label_query = " ".join(f'label:"{label}"' for label in labels)
        query_parts.append(f"({label_query})")

    if filters.language:
        query_parts.append(f"language:{filters.language}")

    categories = [category for category in filters.categories if category]
    if categories:
        query_parts.append(f"({' OR '.join(categories)})")

    if filters.popularity:
        query_parts.append(filters.popularity)

    if filters.query:
        query_parts.append(filters.query)

    return " ".join(query_parts)


def trending_since(period: TrendingPeriod, today: date) -> date:
    """Start of the trending window ending at ``today``."""
    if period == "daily":
        return today - timedelta(days=1)
    if period == "weekly":
        return today - timedelta(days=7)

    year, month = (today.year, today.month - 1) if today.month > 1 else (today.year - 1, 12)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(today.day, last_day))


def build_trending_query(
    period: TrendingPeriod,
    language: Optional[str],
    today: date
) -> str:
    """Build the /search/repositories query for repos created in the window."""
    query = f"created:>{trending_since(period, today).isoformat()}"
    if language:
        query += f" language:{language}"
    return query
