"""High-level client for a Nanoleaf device.

This module wraps the low-level API with a readiness gate: requests are held
back until an initial status probe has reached the device, and an event is
signalled once that happens.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from aiohttp import ClientSession  # noqa: TC002 - Used at runtime for session injection

from pynanoleaf.api import NanoleafAPI, is_success
from pynanoleaf.const import (
    PATH_BRIGHTNESS,
    PATH_EFFECTS,
    PATH_EFFECTS_LIST,
    PATH_HUE,
    PATH_IDENTIFY,
    PATH_RHYTHM_ACTIVE,
    PATH_RHYTHM_CONNECTED,
    PATH_RHYTHM_FIRMWARE_VERSION,
    PATH_RHYTHM_HARDWARE_VERSION,
    PATH_RHYTHM_MODE,
    PATH_SATURATION,
    PATH_STATE,
    PATH_STATUS,
    PATH_TEMPERATURE,
)
from pynanoleaf.exceptions import NanoleafError, NanoleafTimeoutError, NotReadyError, RequestError
from pynanoleaf.models import ClientConfig, PutResult, ReadyState, RhythmInfo


if TYPE_CHECKING:
    from types import TracebackType

_LOGGER = logging.getLogger(__name__)


class NanoleafClient:
    """Client for one Nanoleaf device with a readiness gate.

    A new client is NOT_READY. Its first request is always let through; that
    slot is meant for the status probe started by start_probe(). Once the
    probe succeeds the client becomes READY, the ``ready`` event is set and
    every later request is allowed. Any other request issued while the client
    is not ready raises NotReadyError.

    Example:
        Using the async factory:

        ```python
        from pynanoleaf import ClientConfig, NanoleafClient

        config = ClientConfig(host="192.168.1.20", token="abc123")
        client = await NanoleafClient.create(config, timeout=10)

        await client.turn_on()
        await client.set_brightness(80)
        print(await client.get_effects())

        await client.close()
        ```

        Using the context manager with an injected session:

        ```python
        async with ClientSession() as session:
            async with NanoleafClient(config, session=session) as client:
                result = await client.set_effect("Nemo")
                if not result:
                    print(f"Device rejected effect: HTTP {result.status}")
        ```

    Attributes:
        config: Connection options for the device.
        ready: Event set once the status probe has succeeded.
    """

    def __init__(self, config: ClientConfig, *, session: ClientSession | None = None) -> None:
        """Initialize the client.

        No request is made here; call start_probe() or use create() or the
        async context manager.

        Args:
            config: Connection options for the device.
            session: Optional aiohttp ClientSession. If not provided, one will be
                created on first request and closed by close().
        """
        self.config = config
        self._api = NanoleafAPI(config, session=session)

        self._ready_state = ReadyState.NOT_READY
        self._is_first_request = True
        self.ready = asyncio.Event()
        self._probe_task: asyncio.Task[None] | None = None

    @classmethod
    async def create(
        cls,
        config: ClientConfig,
        *,
        session: ClientSession | None = None,
        timeout: float | None = None,
    ) -> NanoleafClient:
        """Create a client and wait until its status probe has succeeded.

        Args:
            config: Connection options for the device.
            session: Optional aiohttp ClientSession.
            timeout: Optional number of seconds to wait for readiness. Without
                a timeout a device that never answers the probe successfully
                keeps this call waiting indefinitely.

        Returns:
            A READY NanoleafClient.

        Raises:
            NanoleafTimeoutError: If the client is not ready within the timeout.
        """
        client = cls(config, session=session)
        client.start_probe()

        if timeout is None:
            await client.wait_ready()
            return client

        try:
            async with asyncio.timeout(timeout):
                await client.wait_ready()
        except TimeoutError as err:
            await client.close()
            msg = f"Nanoleaf at {config.host} not ready after {timeout}s"
            raise NanoleafTimeoutError(msg) from err

        return client

    @property
    def api(self) -> NanoleafAPI:
        """Get the underlying API client."""
        return self._api

    @property
    def base_url(self) -> str:
        """Get the base URL all request paths are appended to."""
        return self.config.base_url

    @property
    def ready_state(self) -> ReadyState:
        """Get the readiness state."""
        return self._ready_state

    @property
    def is_ready(self) -> bool:
        """Check if the status probe has succeeded."""
        return self._ready_state is ReadyState.READY

    async def __aenter__(self) -> NanoleafClient:
        """Enter the context manager.

        Starts the status probe if needed and waits for readiness.

        Returns:
            Self for use in async with statements.
        """
        self.start_probe()
        await self.wait_ready()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing the client."""
        await self.close()

    async def close(self) -> None:
        """Cancel a pending status probe and close an owned session."""
        if self._probe_task is not None and not self._probe_task.done():
            self._probe_task.cancel()
        await self._api.close()

    # -------------------------------------------------------------------------
    # Readiness
    # -------------------------------------------------------------------------

    def start_probe(self) -> None:
        """Start the status probe in the background.

        The probe takes the first-request slot immediately, so a request made
        right after this call (before the probe completes) raises NotReadyError.
        Calling this more than once has no effect.

        Raises:
            NotReadyError: If another request already used the first-request slot.
        """
        if self._probe_task is not None:
            return

        self._pass_gate()
        self._probe_task = asyncio.create_task(self._probe())

    async def wait_ready(self) -> None:
        """Wait until the status probe has succeeded."""
        await self.ready.wait()

    async def _probe(self) -> None:
        """Fetch the device status and mark the client ready on success."""
        try:
            await self._get(PATH_STATUS)
        except NanoleafError as err:
            _LOGGER.warning("Status probe for %s failed, client stays not ready: %s", self.config.host, err)
            return

        self._ready_state = ReadyState.READY
        self.ready.set()
        _LOGGER.debug("Nanoleaf at %s is ready", self.config.host)

    def _pass_gate(self) -> None:
        """Consume the first-request latch and enforce readiness.

        Raises:
            NotReadyError: If the client is not ready and this is not the first request.
        """
        is_first_request = self._is_first_request
        self._is_first_request = False

        if self._ready_state is not ReadyState.READY and not is_first_request:
            msg = f"Nanoleaf at {self.config.host} is not ready yet"
            raise NotReadyError(msg)

    # -------------------------------------------------------------------------
    # Request Primitives
    # -------------------------------------------------------------------------

    async def get(self, path: str | None = None) -> Any:
        """Fetch a path and return its decoded JSON body.

        Args:
            path: Path below the base URL. Defaults to "/".

        Returns:
            Decoded response body, or None for 204 No Content.

        Raises:
            NotReadyError: If the client is not ready.
            RequestError: If the request fails or the device rejects it.
        """
        self._pass_gate()
        return await self._get(path)

    async def _get(self, path: str | None) -> Any:
        status, data = await self._api.request("GET", path)

        if not is_success(status):
            msg = f"GET {path or '/'} failed: HTTP {status}"
            raise RequestError(msg, status=status)

        return data

    async def put(self, path: str | None, body: Any) -> PutResult:
        """Send a JSON body to a path.

        A status the device rejects is reported through the result, not raised.

        Args:
            path: Path below the base URL. Defaults to "/".
            body: JSON-serializable request body.

        Returns:
            PutResult with ok=True for 2xx (body decoded unless 204), otherwise
            ok=False and the returned status.

        Raises:
            NotReadyError: If the client is not ready.
            RequestError: If the request cannot be sent or the body cannot be decoded.
        """
        self._pass_gate()
        status, data = await self._api.request("PUT", path, json_data=body)

        if not is_success(status):
            _LOGGER.debug("PUT %s rejected by %s: HTTP %d", path or "/", self.config.host, status)
            return PutResult(ok=False, status=status)

        return PutResult(ok=True, status=status, body=data)

    # -------------------------------------------------------------------------
    # Device Status
    # -------------------------------------------------------------------------

    async def get_status(self) -> Any:
        """Get the full status of the device."""
        return await self.get(PATH_STATUS)

    async def identify(self) -> Any:
        """Flash the panels so the device can be picked out."""
        return await self.get(PATH_IDENTIFY)

    # -------------------------------------------------------------------------
    # State Control
    # -------------------------------------------------------------------------

    async def turn_on(self) -> PutResult:
        """Turn the device on."""
        return await self.put(PATH_STATE, {"on": {"value": True}})

    async def turn_off(self) -> PutResult:
        """Turn the device off."""
        return await self.put(PATH_STATE, {"on": {"value": False}})

    async def get_brightness(self) -> Any:
        """Get the current brightness (0-100)."""
        return await self.get(PATH_BRIGHTNESS)

    async def get_hue(self) -> Any:
        """Get the current hue (0-360)."""
        return await self.get(PATH_HUE)

    async def get_saturation(self) -> Any:
        """Get the current saturation (0-100)."""
        return await self.get(PATH_SATURATION)

    async def get_temperature(self) -> Any:
        """Get the current color temperature.

        The device reports 0-100 here rather than Kelvin.
        """
        return await self.get(PATH_TEMPERATURE)

    async def set_brightness(self, value: int) -> PutResult:
        """Set the brightness.

        Args:
            value: Brightness from 0-100. Not validated; the device decides.
        """
        return await self.put(PATH_STATE, {"brightness": {"value": value}})

    async def set_hue(self, value: int) -> PutResult:
        """Set the hue.

        Args:
            value: Hue from 0-360. Not validated; the device decides.
        """
        return await self.put(PATH_STATE, {"hue": {"value": value}})

    async def set_saturation(self, value: int) -> PutResult:
        """Set the saturation.

        Args:
            value: Saturation from 0-100. Not validated; the device decides.
        """
        return await self.put(PATH_STATE, {"sat": {"value": value}})

    async def set_temperature(self, value: int) -> PutResult:
        """Set the color temperature.

        Args:
            value: Temperature from 0-100, the range the device actually accepts.
        """
        return await self.put(PATH_STATE, {"ct": {"value": value}})

    # -------------------------------------------------------------------------
    # Effects
    # -------------------------------------------------------------------------

    async def get_effects(self) -> list[str]:
        """Get the names of the effects installed on the device."""
        return await self.get(PATH_EFFECTS_LIST)

    async def set_effect(self, name: str) -> PutResult:
        """Select an effect.

        Args:
            name: Effect name. Case sensitive.
        """
        return await self.put(PATH_EFFECTS, {"select": name})

    # -------------------------------------------------------------------------
    # Rhythm Module
    # -------------------------------------------------------------------------

    async def rhythm_info(self) -> RhythmInfo | None:
        """Fetch information on an installed Rhythm module.

        The five Rhythm endpoints are queried concurrently. If any of them
        fails, the failure is logged and None is returned; partial results
        are never returned.

        Returns:
            RhythmInfo if every probe succeeded, None otherwise.
        """
        try:
            connected, active, hw_version, fw_version, mode = await asyncio.gather(
                self.get(PATH_RHYTHM_CONNECTED),
                self.get(PATH_RHYTHM_ACTIVE),
                self.get(PATH_RHYTHM_HARDWARE_VERSION),
                self.get(PATH_RHYTHM_FIRMWARE_VERSION),
                self.get(PATH_RHYTHM_MODE),
            )
        except NanoleafError as err:
            _LOGGER.warning("Failed to fetch Rhythm info from %s: %s", self.config.host, err)
            return None

        return RhythmInfo(
            connected=connected,
            active=active,
            hw_version=hw_version,
            fw_version=fw_version,
            mode=mode,
        )
