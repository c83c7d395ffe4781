"""
Session expiry - reacting to a 401 on any call
"""
import asyncio
from placeadmin import (
    PlaceAdminClient,
    CallbackNavigator,
    AuthorizationRejected,
    setup_logging,
)


def back_to_login(route):
    print(f"Session expired, redirecting to {route}")


async def main():
    setup_logging()
    
    async with PlaceAdminClient("admin", navigator=CallbackNavigator(back_to_login)) as api:
        try:
            await api.places.list()
        except AuthorizationRejected:
            # Token already cleared, navigator already called
            print("Authenticated:", api.is_authenticated)


if __name__ == "__main__":
    asyncio.run(main())
