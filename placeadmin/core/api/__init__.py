"""Backend API module: transport, mediator, endpoint table."""
from .async_client import AsyncAPIClient
from .async_auth import AsyncAuthService, AuthResult
from .mediator import AuthMediator
from .endpoints import Endpoint, ENDPOINTS, get_endpoint
from .request import RequestDescriptor, APIResponse
from .errors import (
    APIError,
    TransportError,
    HTTPError,
    AuthorizationRejected,
    AuthenticationError,
    ConfigurationError,
    HTTPStatusCodes,
)
from .events import EventEmitter
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig

__all__ = [
    # Transport
    'AsyncAPIClient',
    'RequestDescriptor',
    'APIResponse',

    # Mediation and auth
    'AuthMediator',
    'AsyncAuthService',
    'AuthResult',

    # Endpoints
    'Endpoint',
    'ENDPOINTS',
    'get_endpoint',

    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',

    # Errors
    'APIError',
    'TransportError',
    'HTTPError',
    'AuthorizationRejected',
    'AuthenticationError',
    'ConfigurationError',
    'HTTPStatusCodes',

    # Events
    'EventEmitter',
]
