"""Authorization token retrieval for devices in pairing mode.

Hold the device's power button for 5-7 seconds until the lights flash to enter
pairing mode. The device then issues one token to an unauthenticated request.
"""

from __future__ import annotations

import logging
from typing import Any

from aiohttp import ClientSession

from pynanoleaf.api import is_success, send_request
from pynanoleaf.const import DEFAULT_PORT, PAIRING_PATH
from pynanoleaf.exceptions import RequestError


_LOGGER = logging.getLogger(__name__)


def pairing_url(host: str, port: int = DEFAULT_PORT) -> str:
    """Build the URL of the token-issuing endpoint."""
    return f"http://{host}:{port}{PAIRING_PATH}"


async def request_token(
    host: str,
    port: int = DEFAULT_PORT,
    *,
    session: ClientSession | None = None,
) -> str:
    """Request a new authorization token from a device in pairing mode.

    Args:
        host: Hostname or IP address of the device.
        port: Port of the local API.
        session: Optional aiohttp ClientSession. If not provided, a temporary
            session is used for this request.

    Returns:
        The authorization token.

    Raises:
        RequestError: If the device rejects the request (it answers 403 when
            not in pairing mode) or returns no token.
        NanoleafConnectionError: If the connection fails.
        NanoleafTimeoutError: If the request times out.
    """
    url = pairing_url(host, port)

    if session is None:
        async with ClientSession() as own_session:
            status, data = await send_request(own_session, "POST", url)
    else:
        status, data = await send_request(session, "POST", url)

    if not is_success(status):
        msg = f"Token request to {host} failed: HTTP {status}. Is the device in pairing mode?"
        raise RequestError(msg, status=status)

    token = _extract_token(data)
    if token is None:
        msg = f"Token request to {host} returned no auth_token"
        raise RequestError(msg, status=status)

    _LOGGER.debug("Received authorization token from %s", host)
    return token


def _extract_token(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    token = data.get("auth_token")
    return str(token) if token else None
