"""
API endpoints for the Contribution Finder service.
"""

from .auth_routes import router as auth_router
from .explore_routes import router as explore_router

__all__ = [
    "auth_router",
    "explore_router"
]
