"""
Session storage protocols.

Defines the interface the request mediator relies on.
"""
from typing import Protocol, Optional, runtime_checkable

TOKEN_KEY = 'token'


@runtime_checkable
class SessionStore(Protocol):
    """
    Protocol for credential store implementations.
    
    A store holds at most one bearer token. Reads of a missing token
    return None, clearing a missing token is a no-op.
    """
    
    def get(self) -> Optional[str]:
        """
        Read the stored token.
        
        Returns:
            Token string if one is stored, None otherwise
        """
        ...
    
    def set(self, token: str) -> None:
        """
        Store a token, replacing any previous one.
        
        Args:
            token: Bearer token
        """
        ...
    
    def clear(self) -> None:
        """Remove the stored token."""
        ...
    
    def exists(self) -> bool:
        """Check if a token is stored."""
        ...
    
    def close(self) -> None:
        """Close storage connection and release resources."""
        ...
