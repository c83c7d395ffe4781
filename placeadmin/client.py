"""
PlaceAdminClient - High-level async client for the places backend.

Example:
    >>> async with PlaceAdminClient("admin") as api:
    ...     await api.login("a@b.com", "secret")
    ...     for place in await api.places.list():
    ...         print(place)
"""
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .core.api import (
    AsyncAPIClient,
    AsyncAuthService,
    AuthMediator,
    AuthResult,
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
)
from .core.navigation import MemoryNavigator, Navigator
from .core.resources import (
    PlaceService,
    CategoryService,
    TagService,
    PlaceImageService,
    SocialMediaService,
)
from .core.session import SessionStore, SQLiteSession, MemorySession


class PlaceAdminClient:
    """
    High-level async client with a persisted credential.

    The session argument selects the credential store:

    1. Named session, persisted to '<name>.session':
        >>> client = PlaceAdminClient("admin")

    2. In-memory (nothing persisted):
        >>> client = PlaceAdminClient()

    3. Custom store:
        >>> client = PlaceAdminClient(MyStore())

    Every call goes through an AuthMediator: the stored token is attached
    as a bearer header, and a 401 on any call clears it and navigates to
    the entry route before the error is raised.
    """

    def __init__(
        self,
        session: Optional[Union[str, SessionStore]] = None,
        *,
        config: Optional[APIConfig] = None,
        navigator: Optional[Navigator] = None,
        base_path: Optional[Path] = None
    ):
        """
        Initialize client.

        Args:
            session: Session name (creates .session file), a SessionStore,
                or None for an in-memory store
            config: API configuration (read from the environment if not given)
            navigator: Target of the redirect on authorization rejection
            base_path: Base path for session files
        """
        from .core.logging import get_logger

        self._config = config or APIConfig.from_env()
        self._logger = get_logger('placeadmin.client')
        self._api = AsyncAPIClient(self._config)

        if session is None:
            self._store: SessionStore = MemorySession()
        elif isinstance(session, (str, Path)):
            self._store = SQLiteSession(session, base_path)
        else:
            self._store = session

        self._navigator = navigator or MemoryNavigator()

        self._mediator = AuthMediator(self._store, self._navigator).install(self._api)
        self._auth = AsyncAuthService(self._api, self._store)

        namespace = self._config.namespace
        self.places = PlaceService(self._api, namespace)
        self.categories = CategoryService(self._api, namespace)
        self.tags = TagService(self._api, namespace)
        self.images = PlaceImageService(self._api, namespace)
        self.social = SocialMediaService(self._api, namespace)

    # =========================================================================
    # Configuration helpers
    # =========================================================================

    @staticmethod
    def create_config(
        base_url: Optional[str] = None,
        namespace: Optional[str] = None,
        proxy: Optional[str] = None,
        proxy_user: Optional[str] = None,
        proxy_pass: Optional[str] = None,
        timeout: float = 60,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None
    ) -> APIConfig:
        """
        Create API configuration with common options.

        Args:
            base_url: Backend root URL (read from the environment if None)
            namespace: 'admin' or 'base' to force every resource path prefix
            proxy: Proxy URL (e.g., "http://proxy:8080")
            proxy_user: Proxy username
            proxy_pass: Proxy password
            timeout: Total request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            user_agent: Custom user agent string

        Returns:
            APIConfig instance
        """
        proxy_config = None
        if proxy:
            proxy_config = ProxyConfig(
                url=proxy,
                username=proxy_user,
                password=proxy_pass
            )

        options = dict(
            namespace=namespace,
            proxy=proxy_config,
            timeout=TimeoutConfig(total=timeout),
            ssl=SSLConfig(verify=verify_ssl),
            user_agent=user_agent or 'placeadmin/1.0.0'
        )
        if base_url is None:
            return APIConfig.from_env(**options)
        return APIConfig(base_url=base_url, **options)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def config(self) -> APIConfig:
        return self._config

    @property
    def store(self) -> SessionStore:
        return self._store

    @property
    def navigator(self) -> Navigator:
        return self._navigator

    @property
    def api(self) -> AsyncAPIClient:
        """Underlying transport."""
        return self._api

    @property
    def is_authenticated(self) -> bool:
        """True while a token is stored."""
        return self._store.exists()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def connect(self) -> 'PlaceAdminClient':
        await self._api.__aenter__()
        return self

    async def close(self) -> None:
        """Close the transport and the credential store."""
        await self._api.close()
        self._store.close()
        self._logger.debug("Client closed")

    async def __aenter__(self) -> 'PlaceAdminClient':
        return await self.connect()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def on(self, event: str, callback: Callable) -> 'PlaceAdminClient':
        """Observe transport events ('request', 'response')."""
        self._api.on(event, callback)
        return self

    def off(self, event: str, callback: Optional[Callable] = None) -> 'PlaceAdminClient':
        self._api.off(event, callback)
        return self

    # =========================================================================
    # Accounts
    # =========================================================================

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Login and store the returned token.

        Args:
            email: Account email
            password: Account password

        Returns:
            AuthResult
        """
        return await self._auth.login(email, password)

    async def logout(self) -> Any:
        """Logout; the stored token is cleared even if the call fails."""
        return await self._auth.logout()

    def __repr__(self) -> str:
        return (
            f"PlaceAdminClient(base_url={self._config.base_url!r}, "
            f"authenticated={self.is_authenticated})"
        )
