"""
Resource operations - places, tags, images, social media
"""
import asyncio
from pathlib import Path
from placeadmin import PlaceAdminClient


async def main():
    async with PlaceAdminClient("admin") as api:
        place = await api.places.add({"name": "Old Harbour", "category": 1})
        place_id = place["id"]
        
        await api.places.edit(place_id, {"description": "Fish market by the pier"})
        await api.tags.add({"name": "seafood"})
        
        # Image uploads are sent as multipart/form-data
        photo = Path("harbour.jpg")
        await api.images.add(place_id, {
            "image": (photo.name, photo.read_bytes(), "image/jpeg"),
        })
        print(await api.images.list(place_id))
        
        await api.social.add(place_id, {"platform": "instagram", "url": "https://instagram.com/oldharbour"})
        print(await api.social.list(place_id))
        
        await api.places.delete(place_id)


if __name__ == "__main__":
    asyncio.run(main())
