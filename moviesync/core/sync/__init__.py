"""
Database synchronization from the TMDB catalog.
"""

from moviesync.core.sync.synchronizer import MovieSynchronizer, SyncResult, SYNC_SUCCESS_MESSAGE
from moviesync.core.sync.normalize import to_stored_record

__all__ = ["MovieSynchronizer", "SyncResult", "SYNC_SUCCESS_MESSAGE", "to_stored_record"]
