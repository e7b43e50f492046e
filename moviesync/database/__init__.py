"""
Database module for the movie catalog.

This module provides the Movie model, connection management, and CRUD operations
for the SQLite database using SQLAlchemy ORM.
"""

from moviesync.database.models import Base, Movie
from moviesync.database.connection import DatabaseManager, get_db_manager
from moviesync.database.init_db import init_database, verify_schema
from moviesync.database import crud

__all__ = [
    # Models
    'Base',
    'Movie',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    # CRUD module
    'crud',
]
