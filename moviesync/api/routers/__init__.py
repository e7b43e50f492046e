"""
API route handlers.
"""

from moviesync.api.routers import movies, retrieve, system

__all__ = ["movies", "retrieve", "system"]
