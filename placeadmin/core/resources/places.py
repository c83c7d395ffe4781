"""Place endpoints."""
from typing import Any, Dict

from .base import ResourceService


class PlaceService(ResourceService):
    """CRUD operations on places."""
    
    async def list(self) -> Any:
        return await self._call('list_places')
    
    async def add(self, data: Dict[str, Any]) -> Any:
        return await self._call('add_place', body=data)
    
    async def details(self, place_id) -> Any:
        return await self._call('place_details', id=place_id)
    
    async def edit(self, place_id, data: Dict[str, Any]) -> Any:
        """Partially update a place (PATCH)."""
        return await self._call('edit_place', body=data, id=place_id)
    
    async def delete(self, place_id) -> Any:
        return await self._call('delete_place', id=place_id)
