"""Low-level API client for the Nanoleaf local HTTP API.

This module provides direct HTTP communication with a single Nanoleaf device.
All requests return (status_code, response_data) tuples; status handling is
left to the caller.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from aiohttp import ClientError, ClientSession, ClientTimeout

from pynanoleaf.exceptions import NanoleafConnectionError, NanoleafTimeoutError, RequestError


if TYPE_CHECKING:
    from types import TracebackType

    from pynanoleaf.models import ClientConfig

_LOGGER = logging.getLogger(__name__)


def is_success(status: int) -> bool:
    """Check if an HTTP status is in the 2xx range."""
    return HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES


async def send_request(
    session: ClientSession,
    method: str,
    url: str,
    *,
    json_data: Any = None,
    timeout: float | None = None,
) -> tuple[int, Any]:
    """Send one request and decode the response.

    Successful responses other than 204 are decoded as JSON whatever content
    type the device declares; an empty body decodes to None.

    Args:
        session: aiohttp ClientSession to send the request with.
        method: HTTP method (GET, PUT, POST).
        url: Absolute URL.
        json_data: Optional body, serialized as JSON.
        timeout: Optional total timeout in seconds.

    Returns:
        Tuple of (status_code, response_data). Response data is None for 204
        and for non-success statuses.

    Raises:
        NanoleafTimeoutError: If the request times out.
        NanoleafConnectionError: If the connection fails.
        RequestError: If a successful response body is not valid JSON.
    """
    kwargs: dict[str, Any] = {}
    if json_data is not None:
        kwargs["json"] = json_data
    if timeout is not None:
        kwargs["timeout"] = ClientTimeout(total=timeout)

    try:
        async with session.request(method, url, **kwargs) as response:
            response_data = None
            if is_success(response.status) and response.status != HTTPStatus.NO_CONTENT:
                try:
                    response_data = await response.json(content_type=None)
                except ValueError as err:
                    _LOGGER.exception("Invalid JSON in response from %s", url)
                    msg = f"Invalid JSON in response from {method} {url}"
                    raise RequestError(msg, status=response.status) from err

            _LOGGER.debug("%s %s -> %d", method, url, response.status)
            return response.status, response_data

    except TimeoutError as err:
        _LOGGER.exception("Request to %s timed out", url)
        msg = f"Request to {url} timed out"
        raise NanoleafTimeoutError(msg) from err

    except ClientError as err:
        _LOGGER.exception("Connection error for %s", url)
        msg = f"Connection error for {url}: {err}"
        raise NanoleafConnectionError(msg) from err


class NanoleafAPI:
    """Low-level API client for one Nanoleaf device.

    This class owns the HTTP session (unless one is injected) and builds
    request URLs from the configured base URL. It applies no readiness rules;
    see NanoleafClient for that.

    Example:
        ```python
        from pynanoleaf.api import NanoleafAPI
        from pynanoleaf.models import ClientConfig

        config = ClientConfig(host="192.168.1.20", token="abc123")

        async with NanoleafAPI(config) as api:
            status, data = await api.request("GET", "/state/brightness")
        ```

    Attributes:
        config: Connection options for the device.
    """

    def __init__(self, config: ClientConfig, *, session: ClientSession | None = None) -> None:
        """Initialize the API client.

        Args:
            config: Connection options for the device.
            session: Optional aiohttp ClientSession. If not provided, one is
                created on first use and closed by close().
        """
        self.config = config
        self._session = session
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        """Get the base URL all request paths are appended to."""
        return self.config.base_url

    async def __aenter__(self) -> NanoleafAPI:
        """Enter the context manager.

        Returns:
            Self for use in async with statements.
        """
        self._ensure_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager, closing the session if this client owns it."""
        await self.close()

    async def close(self) -> None:
        """Close the session if it was created by this client."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    def _ensure_session(self) -> ClientSession:
        """Return the session, creating one if none has been provided.

        Raises:
            RuntimeError: If an injected session has been closed.
        """
        if self._session is None:
            self._session = ClientSession()
            self._owns_session = True

        if self._session.closed:
            msg = "Session is closed. Cannot make request."
            raise RuntimeError(msg)

        return self._session

    def url_for(self, path: str | None) -> str:
        """Build the absolute URL for a path below the base URL."""
        return f"{self.base_url}{path or '/'}"

    async def request(
        self,
        method: str,
        path: str | None = None,
        *,
        json_data: Any = None,
    ) -> tuple[int, Any]:
        """Make a request against the device.

        Args:
            method: HTTP method (GET, PUT).
            path: Path below the base URL (e.g., "/state/brightness").
                Defaults to "/".
            json_data: Optional JSON body.

        Returns:
            Tuple of (status_code, response_data).

        Raises:
            RuntimeError: If an injected session has been closed.
            NanoleafTimeoutError: If the request times out.
            NanoleafConnectionError: If the connection fails.
            RequestError: If a successful response body is not valid JSON.
        """
        session = self._ensure_session()
        return await send_request(
            session,
            method,
            self.url_for(path),
            json_data=json_data,
            timeout=self.config.request_timeout,
        )
