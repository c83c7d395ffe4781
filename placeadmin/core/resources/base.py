"""Base class for resource services."""
from typing import Any, Optional

from ..api.async_client import AsyncAPIClient
from ..api.endpoints import get_endpoint


class ResourceService:
    """
    Issues calls from the endpoint table through the transport.
    
    Services hold no state of their own; payloads go out as given and
    come back unchanged, failures propagate as raised by the transport.
    """
    
    def __init__(self, client: AsyncAPIClient, namespace: Optional[str] = None):
        self._client = client
        self._namespace = namespace
    
    async def _call(self, endpoint: str, body: Any = None, **params) -> Any:
        request = get_endpoint(endpoint).build(self._namespace, body=body, **params)
        return await self._client.request(request)
