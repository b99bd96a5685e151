"""
Database module for Duties backend
"""

from .connection import close_database, get_async_session, init_database, reset_database

__all__ = ["close_database", "get_async_session", "init_database", "reset_database"]
