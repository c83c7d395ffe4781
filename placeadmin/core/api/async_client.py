"""
Async backend API client.

Fully asynchronous HTTP transport with request and response hooks.
"""
import asyncio
import inspect
import logging
from typing import Any, Callable, List, Optional

import aiohttp

from .config import APIConfig
from .errors import APIError, ConfigurationError, TransportError
from .events import EventEmitter
from .request import (
    RequestDescriptor,
    RequestBuilder,
    ResponseHandler,
    APIResponse,
)
from .request.response_handler import Outcome

RequestHook = Callable[[RequestDescriptor], Any]
ResponseHook = Callable[[Outcome], Any]


class AsyncAPIClient:
    """
    Asynchronous HTTP transport for the backend API.

    Features:
    - Full async/await support
    - Configurable base URL, proxy, SSL, timeouts
    - Connection pooling
    - Request hooks, run in order against every outgoing request
    - Response hooks, run in order against every response or failure
      before it reaches the caller

    Example:
        >>> config = APIConfig(base_url='https://api.example.com')
        >>> async with AsyncAPIClient(config) as client:
        ...     places = await client.get('/base/places/')
    """

    def __init__(self, config: Optional[APIConfig] = None):
        """
        Initialize async API client.

        Args:
            config: API configuration (uses defaults if not provided)

        Raises:
            ConfigurationError: If no base URL is configured
        """
        self._config = config or APIConfig.default()
        if not self._config.base_url:
            raise ConfigurationError(
                "No API base URL configured (set VITE_API_BASE_URL or "
                "VITE_API_BASE_URL_PROD, or pass APIConfig(base_url=...))"
            )
        self._builder = RequestBuilder(self._config.base_url)
        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None
        self._closed = False

        self._request_hooks: List[RequestHook] = []
        self._response_hooks: List[ResponseHook] = []
        self._event_emitter = EventEmitter()

        from ..logging import get_logger
        self._logger = get_logger('placeadmin.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    # Hooks and events

    def add_request_hook(self, hook: RequestHook) -> 'AsyncAPIClient':
        """Register a hook returning the (possibly replaced) outgoing request."""
        self._request_hooks.append(hook)
        return self

    def add_response_hook(self, hook: ResponseHook) -> 'AsyncAPIClient':
        """Register a hook returning the (possibly replaced) outcome."""
        self._response_hooks.append(hook)
        return self

    def on(self, event: str, callback: Callable) -> 'AsyncAPIClient':
        """Register an event handler ('request' or 'response')."""
        self._event_emitter.on(event, callback)
        return self

    def off(self, event: str, callback: Optional[Callable] = None) -> 'AsyncAPIClient':
        """Remove an event handler."""
        self._event_emitter.off(event, callback)
        return self

    # Lifecycle

    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
        return self._session

    async def close(self):
        """Close client and release resources."""
        self._closed = True

        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

        if self._connector and not self._connector.closed:
            await self._connector.close()
        self._connector = None

    # Requests

    async def request(self, request: RequestDescriptor) -> Any:
        """
        Send one request through the hook pipeline.

        Args:
            request: Descriptor of the call

        Returns:
            Response payload, unchanged

        Raises:
            APIError: TransportError, HTTPError or AuthorizationRejected,
                re-raised after the response hooks ran
        """
        if self._closed:
            raise APIError("Client is closed", request=request)

        for hook in self._request_hooks:
            request = await self._call_hook(hook, request)

        self._event_emitter.emit('request', request)

        outcome = await self._send(request)

        for hook in self._response_hooks:
            outcome = await self._call_hook(hook, outcome)

        self._event_emitter.emit('response', outcome)

        if isinstance(outcome, APIError):
            raise outcome
        return outcome.payload

    @staticmethod
    async def _call_hook(hook: Callable, value: Any) -> Any:
        result = hook(value)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def _send(self, request: RequestDescriptor) -> Outcome:
        """Transmit a request and convert the result into an outcome."""
        session = await self._ensure_session()
        url = self._builder.build_url(request)

        self._logger.debug(f"{request.method} {url}")

        try:
            async with session.request(
                request.method,
                url,
                data=self._builder.build_data(request),
                headers=self._builder.build_headers(request),
                proxy=self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
            ) as response:
                body = await response.read()
                self._logger.debug(
                    f"Response {response.status} for {request}: "
                    f"{body[:1000] if len(body) > 1000 else body}"
                )
                return ResponseHandler.to_outcome(
                    response.status, body, response.headers, request
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._logger.error(f"Network error on {request}: {e!r}")
            return TransportError(str(e) or type(e).__name__, request=request)

    # Convenience methods

    async def get(self, path: str, **kwargs) -> Any:
        return await self.request(RequestDescriptor('GET', path, **kwargs))

    async def post(self, path: str, body: Any = None, **kwargs) -> Any:
        return await self.request(RequestDescriptor('POST', path, body=body, **kwargs))

    async def patch(self, path: str, body: Any = None, **kwargs) -> Any:
        return await self.request(RequestDescriptor('PATCH', path, body=body, **kwargs))

    async def delete(self, path: str, **kwargs) -> Any:
        return await self.request(RequestDescriptor('DELETE', path, **kwargs))
