"""Pytest configuration and fixtures for integration tests."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from dotenv import load_dotenv

from pynanoleaf.models import ClientConfig


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


# Load .env file from project root
env_path = Path(__file__).parents[2] / ".env"
load_dotenv(env_path)


@pytest.fixture(scope="session")
def integration_config() -> ClientConfig:
    """Load integration test configuration from environment.

    Returns:
        ClientConfig for the device under test.
    """
    try:
        return ClientConfig.from_env()
    except ValueError as err:
        pytest.skip(f"{err}. Create a .env file to run integration tests.")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for integration tests."""
    config.addinivalue_line("markers", "integration: Integration tests requiring a real device")


@pytest.fixture(autouse=True)
async def command_delay(request: pytest.FixtureRequest) -> AsyncGenerator[None]:
    """Pause after each integration test so the device can settle between commands."""
    yield
    if "integration" in request.keywords:
        await asyncio.sleep(1.0)
