"""
Session management module.

Provides the credential store holding the bearer token between calls.
SQLite storage persists across restarts like browser local storage;
memory storage is used for tests and throwaway clients.
"""
from .protocols import SessionStore, TOKEN_KEY
from .sqlite_session import SQLiteSession
from .memory_session import MemorySession

__all__ = [
    'SessionStore',
    'TOKEN_KEY',
    'SQLiteSession',
    'MemorySession',
]
