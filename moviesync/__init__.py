"""
Movie catalog synchronization service.

This package fetches high-rated movies from the TMDB catalog, deduplicates
them against a local SQLite store, and exposes CRUD access over HTTP.
"""

__version__ = "1.0.0"
