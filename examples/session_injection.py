"""Example showing session injection and the readiness event."""

import asyncio

from aiohttp import ClientSession

from pynanoleaf import ClientConfig, NanoleafClient, NotReadyError


async def main() -> None:
    """Share one aiohttp session between two devices."""
    async with ClientSession() as session:
        living_room = NanoleafClient(ClientConfig(host="192.168.1.20", token="token_1"), session=session)
        bedroom = NanoleafClient(ClientConfig(host="192.168.1.21", token="token_2"), session=session)

        for client in (living_room, bedroom):
            client.start_probe()

        # Requests made before the probe finishes are refused
        try:
            await living_room.turn_on()
        except NotReadyError:
            print("Living room not ready yet, waiting...")

        await asyncio.gather(living_room.ready.wait(), bedroom.ready.wait())

        await asyncio.gather(living_room.turn_on(), bedroom.turn_off())

        # Clients do not close injected sessions
        await living_room.close()
        await bedroom.close()


if __name__ == "__main__":
    asyncio.run(main())
