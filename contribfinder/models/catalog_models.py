"""
Pydantic models for the filter vocabulary exposed to the frontend.
"""

from typing import List
from pydantic import BaseModel


class FilterOption(BaseModel):
    value: str
    label: str


class PopularityOption(FilterOption):
    description: str


class CategoryOption(FilterOption):
    icon: str


class FilterCatalog(BaseModel):
    """Every option list the search and trending filters accept."""
    languages: List[FilterOption]
    sort_options: List[FilterOption]
    popularity_options: List[PopularityOption]
    label_options: List[FilterOption]
    categories: List[CategoryOption]
    trending_periods: List[FilterOption]
    beginner_labels: List[str]
