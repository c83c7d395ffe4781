"""
placeadmin - Async Python client for the places administration backend.

Usage:
    >>> from placeadmin import PlaceAdminClient
    >>>
    >>> async with PlaceAdminClient("admin") as api:
    ...     await api.login("a@b.com", "secret")
    ...     places = await api.places.list()
"""
import logging
from .client import PlaceAdminClient

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAPIClient,
    AsyncAuthService,
    AuthMediator,
    AuthResult,
    RequestDescriptor,
    APIResponse,
)

# Errors
from .core.api.errors import (
    APIError,
    TransportError,
    HTTPError,
    AuthorizationRejected,
    AuthenticationError,
    ConfigurationError,
)

# Session management
from .core.session import (
    SessionStore,
    SQLiteSession,
    MemorySession
)
from .core.navigation import Navigator, MemoryNavigator, CallbackNavigator

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for placeadmin modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'placeadmin',
        'placeadmin.api',
        'placeadmin.auth',
        'placeadmin.client',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'PlaceAdminClient',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'AsyncAPIClient',
    'AsyncAuthService',
    'AuthMediator',
    'AuthResult',
    'RequestDescriptor',
    'APIResponse',
    'APIError',
    'TransportError',
    'HTTPError',
    'AuthorizationRejected',
    'AuthenticationError',
    'ConfigurationError',
    'SessionStore',
    'SQLiteSession',
    'MemorySession',
    'Navigator',
    'MemoryNavigator',
    'CallbackNavigator',
    'setup_logging',
]
