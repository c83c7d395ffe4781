"""
Basic usage - login and list places
"""
import asyncio
from placeadmin import PlaceAdminClient, APIConfig


async def main():
    # Base URL from VITE_API_BASE_URL (or VITE_API_BASE_URL_PROD when MODE=production)
    async with PlaceAdminClient("admin") as api:
        if not api.is_authenticated:
            await api.login("admin@example.com", "password")
        
        for place in await api.places.list():
            print(place)
    
    
    # Explicit configuration
    config = APIConfig(base_url="http://localhost:8000")
    async with PlaceAdminClient(config=config) as api:
        await api.login("admin@example.com", "password")
        print(await api.categories.list())
        await api.logout()


if __name__ == "__main__":
    asyncio.run(main())
