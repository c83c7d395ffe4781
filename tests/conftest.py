"""Pytest fixtures for placeadmin tests."""
import pytest
from unittest.mock import AsyncMock

from placeadmin.core.api import AsyncAPIClient, APIConfig, AuthMediator, APIResponse
from placeadmin.core.navigation import MemoryNavigator
from placeadmin.core.session import MemorySession

BASE_URL = 'http://api.test'


@pytest.fixture
def config():
    """Configuration pointing at a fake backend."""
    return APIConfig(base_url=BASE_URL)


@pytest.fixture
def store():
    """Empty in-memory credential store."""
    return MemorySession()


@pytest.fixture
def navigator():
    """Navigator sitting on an authenticated page."""
    return MemoryNavigator('/places')


@pytest.fixture
def mediator(store, navigator):
    return AuthMediator(store, navigator)


@pytest.fixture
def api(config, mediator):
    """
    Transport with the mediator installed and the wire replaced.
    
    api._send records every request reaching the wire; set its
    return_value (or side_effect) to choose the outcome.
    """
    client = AsyncAPIClient(config)
    mediator.install(client)
    client._send = AsyncMock(return_value=APIResponse(status=200, payload={'ok': True}))
    return client


@pytest.fixture
def sent(api):
    """Returns the RequestDescriptor that reached the wire (last by default)."""
    def get(index=-1):
        return api._send.await_args_list[index].args[0]
    return get
