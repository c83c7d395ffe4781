"""
Navigation targets for the admin front end.

The mediator only ever navigates to the unauthenticated entry route.
"""
from typing import Callable, List, Optional, Protocol, runtime_checkable

ENTRY_ROUTE = '/'


@runtime_checkable
class Navigator(Protocol):
    """Anything able to move the user to another route."""
    
    def navigate(self, route: str) -> None:
        ...


class MemoryNavigator:
    """
    Navigator that only records where it was sent.
    
    Example:
        >>> nav = MemoryNavigator('/places')
        >>> nav.navigate('/')
        >>> nav.location
        '/'
    """
    
    def __init__(self, location: Optional[str] = None):
        self.location = location
        self.history: List[str] = []
    
    def navigate(self, route: str) -> None:
        self.history.append(route)
        self.location = route


class CallbackNavigator:
    """Navigator forwarding every route to a callable."""
    
    def __init__(self, callback: Callable[[str], None]):
        self._callback = callback
    
    def navigate(self, route: str) -> None:
        self._callback(route)
