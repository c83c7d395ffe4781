"""
In-memory session storage implementation.

Provides non-persistent token storage for testing and temporary use.
"""
import threading
from typing import Dict, Optional

from .protocols import SessionStore, TOKEN_KEY


class MemorySession(SessionStore):
    """
    In-memory token storage.
    
    Data is lost when the object is destroyed.
    
    Useful for:
    - Unit testing
    - Temporary sessions
    - CI/CD environments
    
    Example:
        >>> store = MemorySession()
        >>> store.set('abc')
        >>> store.get()
        'abc'
    """
    
    def __init__(self, token: Optional[str] = None):
        self._lock = threading.Lock()
        self._data: Dict[str, str] = {}
        if token:
            self._data[TOKEN_KEY] = token
    
    def get(self) -> Optional[str]:
        with self._lock:
            return self._data.get(TOKEN_KEY)
    
    def set(self, token: str) -> None:
        with self._lock:
            self._data[TOKEN_KEY] = token
    
    def clear(self) -> None:
        with self._lock:
            self._data.pop(TOKEN_KEY, None)
    
    def exists(self) -> bool:
        return self.get() is not None
    
    def close(self) -> None:
        """Close storage (no-op for memory storage)."""
        pass
    
    def __enter__(self) -> 'MemorySession':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
    
    def __repr__(self) -> str:
        return f"MemorySession(authenticated={self.exists()})"
