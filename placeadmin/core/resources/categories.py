"""Category endpoints."""
from typing import Any, Dict

from .base import ResourceService


class CategoryService(ResourceService):
    
    async def list(self) -> Any:
        return await self._call('list_categories')
    
    async def add(self, data: Dict[str, Any]) -> Any:
        return await self._call('add_category', body=data)
    
    async def details(self, category_id) -> Any:
        return await self._call('category_details', id=category_id)
    
    async def edit(self, category_id, data: Dict[str, Any]) -> Any:
        return await self._call('edit_category', body=data, id=category_id)
    
    async def delete(self, category_id) -> Any:
        return await self._call('delete_category', id=category_id)
