"""Backend API errors and exceptions."""
from .api_errors import (
    UNAUTHORIZED,
    HTTPStatusCodes,
    APIError,
    TransportError,
    HTTPError,
    AuthorizationRejected,
    AuthenticationError,
    ConfigurationError,
    error_for_status,
)

__all__ = [
    'UNAUTHORIZED',
    'HTTPStatusCodes',
    'APIError',
    'TransportError',
    'HTTPError',
    'AuthorizationRejected',
    'AuthenticationError',
    'ConfigurationError',
    'error_for_status',
]
