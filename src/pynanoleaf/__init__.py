"""Python client library for the Nanoleaf local HTTP API.

This package provides an async client for controlling a Nanoleaf device over
its local REST API, and a helper for retrieving an authorization token while
the device is in pairing mode.

The library is organized into two layers:
1. **API Layer** (pynanoleaf.api): Low-level HTTP communication with the device
2. **Client Layer** (pynanoleaf.client): Readiness gate and device control

Example:
    Basic usage:

    ```python
    from pynanoleaf import ClientConfig, NanoleafClient

    config = ClientConfig(host="192.168.1.20", token="abc123")

    async with NanoleafClient(config) as client:
        await client.turn_on()
        await client.set_brightness(60)
        await client.set_effect("Nemo")

        print(f"Brightness: {await client.get_brightness()}")
    ```

    Obtaining a token:

    ```python
    from pynanoleaf import request_token

    token = await request_token("192.168.1.20")
    ```
"""

from __future__ import annotations

from pynanoleaf.api import NanoleafAPI
from pynanoleaf.client import NanoleafClient
from pynanoleaf.exceptions import (
    NanoleafConnectionError,
    NanoleafError,
    NanoleafTimeoutError,
    NotReadyError,
    RequestError,
)
from pynanoleaf.models import ClientConfig, PutResult, ReadyState, RhythmInfo
from pynanoleaf.pairing import request_token


__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "NanoleafAPI",
    "NanoleafClient",
    "NanoleafConnectionError",
    "NanoleafError",
    "NanoleafTimeoutError",
    "NotReadyError",
    "PutResult",
    "ReadyState",
    "RequestError",
    "RhythmInfo",
    "__version__",
    "request_token",
]
