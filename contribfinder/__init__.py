"""
Contribution Finder

A FastAPI service that helps first-time contributors find beginner-friendly
GitHub issues, and proxies GitHub OAuth sign-in for the web frontend.
"""

__version__ = "1.0.0"
__author__ = "Contribution Finder"
__description__ = "Beginner issue discovery and GitHub OAuth proxy"
