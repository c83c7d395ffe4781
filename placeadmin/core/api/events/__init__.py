"""Event emitter for transport observers."""
from .event_emitter import EventEmitter

__all__ = [
    'EventEmitter',
]
