"""Place image endpoints."""
from typing import Any, Dict

from .base import ResourceService


class PlaceImageService(ResourceService):
    """
    Images attached to a place.
    
    Uploads are sent as multipart/form-data, every other call as JSON.
    """
    
    async def list(self, place_id) -> Any:
        return await self._call('list_place_images', place_id=place_id)
    
    async def add(self, place_id, form: Any) -> Any:
        """
        Upload an image to a place.
        
        Args:
            place_id: Place identifier
            form: aiohttp.FormData / MultipartWriter, a mapping of field
                names to values (file fields as (filename, content) or
                (filename, content, content_type) tuples), or bare image
                bytes or file object
                
        Returns:
            Response payload
        """
        return await self._call('add_place_image', body=form, place_id=place_id)
    
    async def details(self, image_id) -> Any:
        return await self._call('image_details', id=image_id)
    
    async def edit(self, image_id, data: Dict[str, Any]) -> Any:
        return await self._call('edit_image', body=data, id=image_id)
    
    async def delete(self, image_id) -> Any:
        return await self._call('delete_image', id=image_id)
