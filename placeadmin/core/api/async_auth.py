"""
Async authentication service.

Handles login and logout against the backend and keeps the session
store in step with the session state.
"""
from dataclasses import dataclass
from typing import Any

from .async_client import AsyncAPIClient
from .endpoints import ENDPOINTS
from .errors import AuthenticationError
from ..logging import get_logger
from ..session import SessionStore


@dataclass
class AuthResult:
    """Authentication result."""
    email: str
    token: str
    payload: Any = None


class AsyncAuthService:
    """
    Asynchronous authentication service.

    Unauthenticated -> login -> Authenticated -> logout -> Unauthenticated.
    The other way back to Unauthenticated is a 401 on any call, handled
    by the AuthMediator.
    """

    def __init__(
        self,
        client: AsyncAPIClient,
        store: SessionStore
    ):
        """
        Initialize auth service.

        Args:
            client: Async API client
            store: Store receiving the token
        """
        self._client = client
        self._store = store
        self._logger = get_logger('placeadmin.auth')

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Login with email and password.

        Args:
            email: Account email
            password: Account password

        Returns:
            AuthResult carrying the token and the raw response payload

        Raises:
            AuthenticationError: If the response carries no token
            APIError: If the request fails
        """
        payload = await self._client.request(
            ENDPOINTS['login'].build(body={'email': email, 'password': password})
        )

        token = payload.get('token') if isinstance(payload, dict) else None
        if not token:
            raise AuthenticationError("Login response did not contain a token", payload=payload)

        self._store.set(token)
        self._logger.info(f"Logged in as {email}")

        return AuthResult(email=email, token=token, payload=payload)

    async def logout(self) -> Any:
        """Logout; the stored token is dropped even if the call fails."""
        try:
            return await self._client.request(ENDPOINTS['logout'].build())
        finally:
            self._store.clear()
            self._logger.info("Logged out")
