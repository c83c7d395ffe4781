"""
SQLite session storage implementation.

Persists the bearer token in a small key-value table so it survives
process restarts.
"""
import sqlite3
import threading
from pathlib import Path
from datetime import datetime
from typing import Optional, Union
from contextlib import contextmanager

from .protocols import SessionStore, TOKEN_KEY


class SQLiteSession(SessionStore):
    """
    SQLite-based token storage.
    
    Stores key-value pairs in a local SQLite database file; the token
    lives under the 'token' key. Thread-safe.
    
    Example:
        >>> store = SQLiteSession("admin")
        >>> # Creates admin.session file
        >>> store.set(token)
        >>> store.get()
    """
    
    EXTENSION = '.session'
    SCHEMA_VERSION = 1
    
    def __init__(
        self,
        session_name: Union[str, Path],
        base_path: Optional[Path] = None
    ):
        """
        Initialize SQLite session storage.
        
        Args:
            session_name: Session name (without extension) or full path
            base_path: Optional base directory for session files
        """
        self._lock = threading.Lock()
        self._conn: Optional[sqlite3.Connection] = None
        
        if isinstance(session_name, Path) or session_name.endswith(self.EXTENSION):
            self._path = Path(session_name)
        elif base_path:
            self._path = Path(base_path) / f"{session_name}{self.EXTENSION}"
        else:
            self._path = Path(f"{session_name}{self.EXTENSION}")
        
        self._path.parent.mkdir(parents=True, exist_ok=True)
        
        self._init_db()
    
    @property
    def path(self) -> Path:
        """Get session file path."""
        return self._path
    
    @contextmanager
    def _get_connection(self):
        """Get thread-safe database connection."""
        with self._lock:
            if self._conn is None:
                self._conn = sqlite3.connect(
                    str(self._path),
                    check_same_thread=False
                )
                self._conn.row_factory = sqlite3.Row
            yield self._conn
    
    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS version (
                    version INTEGER PRIMARY KEY
                )
            ''')
            
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            ''')
            
            cursor.execute('SELECT version FROM version LIMIT 1')
            if cursor.fetchone() is None:
                cursor.execute(
                    'INSERT INTO version (version) VALUES (?)',
                    (self.SCHEMA_VERSION,)
                )
            
            conn.commit()
    
    def get_item(self, key: str) -> Optional[str]:
        """Read a raw value by key."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('SELECT value FROM storage WHERE key = ?', (key,))
            row = cursor.fetchone()
            return None if row is None else row['value']
    
    def set_item(self, key: str, value: str) -> None:
        """Write a raw value by key."""
        with self._get_connection() as conn:
            conn.execute('''
                INSERT OR REPLACE INTO storage (key, value, updated_at)
                VALUES (?, ?, ?)
            ''', (key, value, datetime.now().isoformat()))
            conn.commit()
    
    def remove_item(self, key: str) -> None:
        """Delete a raw value by key (no-op if missing)."""
        with self._get_connection() as conn:
            conn.execute('DELETE FROM storage WHERE key = ?', (key,))
            conn.commit()
    
    def get(self) -> Optional[str]:
        return self.get_item(TOKEN_KEY)
    
    def set(self, token: str) -> None:
        self.set_item(TOKEN_KEY, token)
    
    def clear(self) -> None:
        self.remove_item(TOKEN_KEY)
    
    def exists(self) -> bool:
        return self.get() is not None
    
    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
    
    def delete_file(self) -> None:
        """Delete the session file completely."""
        self.close()
        if self._path.exists():
            self._path.unlink()
    
    def __enter__(self) -> 'SQLiteSession':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
    
    def __repr__(self) -> str:
        return f"SQLiteSession({str(self._path)!r})"
