"""Tag endpoints. The backend exposes no tag deletion."""
from typing import Any, Dict

from .base import ResourceService


class TagService(ResourceService):
    
    async def list(self) -> Any:
        return await self._call('list_tags')
    
    async def add(self, data: Dict[str, Any]) -> Any:
        return await self._call('add_tag', body=data)
    
    async def details(self, tag_id) -> Any:
        return await self._call('tag_details', id=tag_id)
    
    async def edit(self, tag_id, data: Dict[str, Any]) -> Any:
        return await self._call('edit_tag', body=data, id=tag_id)
