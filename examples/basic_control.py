"""Basic control example for pynanoleaf library."""

import asyncio
import logging

from pynanoleaf import ClientConfig, NanoleafClient


async def main() -> None:
    """Demonstrate basic device control."""
    logging.basicConfig(level=logging.DEBUG)

    config = ClientConfig(host="192.168.1.20", token="your_token")

    # Waits for the status probe before returning
    client = await NanoleafClient.create(config, timeout=10)

    try:
        status = await client.get_status()
        print(f"Connected to {status['name']} (firmware {status['firmwareVersion']})")

        print("\nTurning device on...")
        await client.turn_on()

        print("Setting brightness to 60%...")
        result = await client.set_brightness(60)
        if not result:
            print(f"  Device rejected brightness: HTTP {result.status}")

        effects = await client.get_effects()
        print(f"\nInstalled effects: {', '.join(effects)}")
        if effects:
            await client.set_effect(effects[0])

        info = await client.rhythm_info()
        if info is None:
            print("\nRhythm module: unavailable")
        else:
            print(f"\nRhythm module: {info.as_dict()}")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
