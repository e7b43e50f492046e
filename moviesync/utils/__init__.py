"""
Shared utilities package.

This package contains logging configuration and ``.env`` loading used by the
API and the command-line scripts.
"""

from moviesync.utils.env import load_env
from moviesync.utils.logging_config import setup_logging, get_logger

__all__ = ['load_env', 'setup_logging', 'get_logger']
