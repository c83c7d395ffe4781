"""
Authenticated request mediator.

Attaches the stored bearer token to every outgoing request and recovers
from authorization rejections on the way back.
"""
from typing import Optional

from .errors import AuthorizationRejected
from .request import RequestDescriptor
from .request.response_handler import Outcome
from ..logging import get_logger
from ..navigation import ENTRY_ROUTE, Navigator
from ..session import SessionStore

BEARER_PREFIX = 'Bearer'


class AuthMediator:
    """
    Two ordered hooks installed on an AsyncAPIClient.
    
    before_send reads the token from the store on every call; a missing
    token leaves the request unauthenticated. after_receive clears the
    token and navigates to the entry route when the outcome is an
    AuthorizationRejected, and hands every outcome back unchanged so the
    transport re-raises failures to the caller.
    
    Example:
        >>> mediator = AuthMediator(MemorySession(), MemoryNavigator())
        >>> mediator.install(api_client)
    """
    
    def __init__(
        self,
        store: SessionStore,
        navigator: Navigator,
        entry_route: str = ENTRY_ROUTE
    ):
        self._store = store
        self._navigator = navigator
        self._entry_route = entry_route
        self._logger = get_logger('placeadmin.auth')
    
    @property
    def store(self) -> SessionStore:
        return self._store
    
    @property
    def navigator(self) -> Navigator:
        return self._navigator
    
    def install(self, client) -> 'AuthMediator':
        """Register both hooks on a transport."""
        client.add_request_hook(self.before_send)
        client.add_response_hook(self.after_receive)
        return self
    
    def before_send(self, request: RequestDescriptor) -> RequestDescriptor:
        token = self._store.get()
        if not token:
            return request
        return request.with_header('Authorization', f"{BEARER_PREFIX} {token}")
    
    def after_receive(self, outcome: Outcome) -> Outcome:
        if isinstance(outcome, AuthorizationRejected):
            self.recover(outcome)
        return outcome
    
    def recover(self, error: Optional[AuthorizationRejected] = None) -> None:
        """Drop the credential and return to the entry route. Idempotent."""
        self._logger.error('Unauthorized access. Please log in again.')
        if error is not None and error.request is not None:
            self._logger.debug(f"Rejected request: {error.request}")
        self._store.clear()
        self._navigator.navigate(self._entry_route)
