"""Place social media endpoints."""
from typing import Any, Dict

from .base import ResourceService


class SocialMediaService(ResourceService):
    """Social media records (links, handles) attached to a place."""
    
    async def list(self, place_id) -> Any:
        return await self._call('list_place_social_media', place_id=place_id)
    
    async def add(self, place_id, data: Dict[str, Any]) -> Any:
        return await self._call('add_place_social_media', body=data, place_id=place_id)
    
    async def details(self, social_id) -> Any:
        return await self._call('social_media_details', id=social_id)
    
    async def edit(self, social_id, data: Dict[str, Any]) -> Any:
        return await self._call('edit_social_media', body=data, id=social_id)
    
    async def delete(self, social_id) -> Any:
        return await self._call('delete_social_media', id=social_id)
