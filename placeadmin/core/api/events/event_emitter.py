"""Event emitter used by the transport to notify observers."""
from typing import Dict, List, Callable, Optional


class EventEmitter:
    """
    Minimal observer registry.
    
    The transport emits 'request' with the final RequestDescriptor and
    'response' with the outcome (APIResponse or APIError) of every call.
    """
    
    def __init__(self):
        self._events: Dict[str, List[Callable]] = {}
    
    def on(self, event: str, callback: Callable) -> 'EventEmitter':
        """Registers an event handler."""
        self._events.setdefault(event, []).append(callback)
        return self
    
    def emit(self, event: str, *args, **kwargs):
        """Calls every handler registered for an event."""
        for callback in list(self._events.get(event, ())):
            callback(*args, **kwargs)
    
    def off(self, event: str, callback: Optional[Callable] = None) -> 'EventEmitter':
        """Removes one handler, or all handlers of an event."""
        if event not in self._events:
            return self
        
        if callback is None:
            del self._events[event]
        else:
            self._events[event] = [cb for cb in self._events[event] if cb != callback]
        
        return self
    
    def listener_count(self, event: str) -> int:
        return len(self._events.get(event, ()))
