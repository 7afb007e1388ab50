"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import ClientSession, web

from pynanoleaf.models import ClientConfig


if TYPE_CHECKING:
    from collections.abc import Callable

    from aiohttp.test_utils import TestClient


TOKEN = "abc"
API_ROOT = f"/api/v1/{TOKEN}"

SAMPLE_STATUS_RESPONSE = {
    "name": "Shapes 4D2A",
    "serialNo": "S19124C8036",
    "manufacturer": "Nanoleaf",
    "firmwareVersion": "9.2.4",
    "model": "NL42",
    "state": {
        "on": {"value": True},
        "brightness": {"value": 80, "max": 100, "min": 0},
        "hue": {"value": 120, "max": 360, "min": 0},
        "sat": {"value": 100, "max": 100, "min": 0},
        "ct": {"value": 40, "max": 100, "min": 0},
    },
    "effects": {"select": "Nemo", "effectsList": ["Nemo", "Flames", "Forest"]},
}

SAMPLE_RHYTHM = {
    "rhythmConnected": True,
    "rhythmActive": False,
    "hardwareVersion": "1.4",
    "firmwareVersion": "2.4.3",
    "rhythmMode": 0,
}


def make_device_app(
    *,
    status_code: int = HTTPStatus.OK,
    failing_paths: tuple[str, ...] = (),
) -> web.Application:
    """Create an aiohttp application that behaves like a Nanoleaf device.

    Args:
        status_code: Status returned by the status endpoint ("/").
        failing_paths: Paths (below the token) that answer 500.

    Returns:
        Application recording every request in app["requests"].
    """
    app = web.Application()
    app["requests"] = []

    @web.middleware
    async def record(request: web.Request, handler: Any) -> web.StreamResponse:
        body = await request.json() if request.can_read_body else None
        request.app["requests"].append((request.method, request.path, body, request.content_type))
        if request.path.removeprefix(API_ROOT) in failing_paths:
            return web.Response(status=HTTPStatus.INTERNAL_SERVER_ERROR)
        return await handler(request)

    app.middlewares.append(record)

    async def get_status(request: web.Request) -> web.Response:
        if status_code != HTTPStatus.OK:
            return web.Response(status=status_code)
        return web.json_response(SAMPLE_STATUS_RESPONSE)

    async def identify(request: web.Request) -> web.Response:
        return web.Response(status=HTTPStatus.NO_CONTENT)

    async def put_state(request: web.Request) -> web.Response:
        body = await request.json()
        brightness = body.get("brightness", {}).get("value")
        if brightness is not None and not 0 <= brightness <= 100:
            return web.Response(status=HTTPStatus.BAD_REQUEST)
        return web.Response(status=HTTPStatus.NO_CONTENT)

    def state_field(name: str) -> Any:
        async def handler(request: web.Request) -> web.Response:
            return web.json_response(SAMPLE_STATUS_RESPONSE["state"][name]["value"])

        return handler

    async def effects_list(request: web.Request) -> web.Response:
        return web.json_response(SAMPLE_STATUS_RESPONSE["effects"]["effectsList"])

    async def put_effects(request: web.Request) -> web.Response:
        body = await request.json()
        if body.get("select") not in SAMPLE_STATUS_RESPONSE["effects"]["effectsList"]:
            return web.Response(status=HTTPStatus.NOT_FOUND)
        return web.json_response({"select": body["select"]})

    def rhythm_field(name: str) -> Any:
        async def handler(request: web.Request) -> web.Response:
            return web.json_response(SAMPLE_RHYTHM[name])

        return handler

    app.router.add_get(f"{API_ROOT}/", get_status)
    app.router.add_get(f"{API_ROOT}/identify", identify)
    app.router.add_put(f"{API_ROOT}/state", put_state)
    app.router.add_get(f"{API_ROOT}/state/brightness", state_field("brightness"))
    app.router.add_get(f"{API_ROOT}/state/hue", state_field("hue"))
    app.router.add_get(f"{API_ROOT}/state/sat", state_field("sat"))
    app.router.add_get(f"{API_ROOT}/state/ct", state_field("ct"))
    app.router.add_get(f"{API_ROOT}/effects/effectsList", effects_list)
    app.router.add_put(f"{API_ROOT}/effects", put_effects)
    for name in SAMPLE_RHYTHM:
        app.router.add_get(f"{API_ROOT}/rhythm/{name}", rhythm_field(name))

    return app


def make_config(test_client: TestClient) -> ClientConfig:
    """Build a ClientConfig pointing at an aiohttp test server."""
    return ClientConfig(host=test_client.server.host, port=test_client.server.port, token=TOKEN)


@pytest.fixture
def device_app() -> web.Application:
    """Create a healthy fake device."""
    return make_device_app()


@pytest.fixture
def mock_response() -> MagicMock:
    """Create a mock aiohttp ClientResponse.

    Returns:
        Mock ClientResponse for testing.
    """
    response = MagicMock()
    response.status = HTTPStatus.OK
    response.headers = {}
    response.json = AsyncMock(return_value=None)
    return response


@pytest.fixture
def mock_session(mock_response: MagicMock) -> MagicMock:
    """Create a mock aiohttp ClientSession whose requests yield mock_response.

    Returns:
        Mock ClientSession for testing.
    """
    session = MagicMock(spec=ClientSession)
    session.closed = False
    request_context = session.request.return_value
    request_context.__aenter__ = AsyncMock(return_value=mock_response)
    request_context.__aexit__ = AsyncMock(return_value=False)
    return session


@pytest.fixture
def device_app_factory() -> Callable[..., web.Application]:
    """Return the fake device factory for tests that need a misbehaving device."""
    return make_device_app


@pytest.fixture
def config_for() -> Callable[[TestClient], ClientConfig]:
    """Return a helper building a ClientConfig for a test server."""
    return make_config
