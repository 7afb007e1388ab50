"""Data models for Nanoleaf API configuration and responses."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any

from pynanoleaf.const import DEFAULT_BASE_PATH, DEFAULT_PORT, ENV_PREFIX


__all__ = [
    "ClientConfig",
    "PutResult",
    "ReadyState",
    "RhythmInfo",
]


@dataclass(frozen=True)
class ClientConfig:
    """Connection options for a single Nanoleaf device.

    Attributes:
        host: Hostname or IP address of the device.
        token: Authorization token obtained while the device was in pairing mode.
        port: Port of the local API (default: 16021).
        base_path: API base path (default: /api/v1/).
        request_timeout: Optional total timeout in seconds for each request.
            None leaves the transport's default in place.
        base_url: Derived base URL, computed once at construction.
    """

    host: str
    token: str
    port: int = DEFAULT_PORT
    base_path: str = DEFAULT_BASE_PATH
    request_timeout: float | None = None
    base_url: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Derive the base URL from the connection options."""
        object.__setattr__(
            self,
            "base_url",
            f"http://{self.host}:{self.port}{self.base_path}{self.token}",
        )

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> ClientConfig:
        """Build a configuration from environment variables.

        Reads ``<prefix>HOST``, ``<prefix>TOKEN``, ``<prefix>PORT`` and
        ``<prefix>BASE_PATH``.

        Args:
            prefix: Environment variable prefix.

        Returns:
            ClientConfig instance.

        Raises:
            ValueError: If host or token is missing, or the port is not an integer.
        """
        host = os.getenv(f"{prefix}HOST")
        token = os.getenv(f"{prefix}TOKEN")

        if not host or not token:
            msg = f"Missing required environment variables {prefix}HOST and {prefix}TOKEN"
            raise ValueError(msg)

        return cls(
            host=host,
            token=token,
            port=int(os.getenv(f"{prefix}PORT", str(DEFAULT_PORT))),
            base_path=os.getenv(f"{prefix}BASE_PATH", DEFAULT_BASE_PATH),
        )


class ReadyState(Enum):
    """Readiness of a client. Moves from NOT_READY to READY once, never back."""

    NOT_READY = "not_ready"
    READY = "ready"


@dataclass(frozen=True)
class PutResult:
    """Outcome of a PUT request.

    A rejected request is reported here rather than raised, so callers must
    check ``ok`` (or the truth value of the result).

    Attributes:
        ok: Whether the device accepted the request (2xx).
        status: HTTP status returned by the device.
        body: Decoded response body. None for 204 and for rejected requests.
    """

    ok: bool
    status: int
    body: Any = None

    def __bool__(self) -> bool:
        """Return whether the request was accepted."""
        return self.ok

    @property
    def has_content(self) -> bool:
        """Check if the device answered with a body."""
        return self.ok and self.status != HTTPStatus.NO_CONTENT


@dataclass(frozen=True)
class RhythmInfo:
    """Information reported by an installed Rhythm module.

    Attributes:
        connected: Whether a Rhythm module is connected.
        active: Whether the Rhythm module is the active sound source.
        hw_version: Rhythm hardware version.
        fw_version: Rhythm firmware version.
        mode: Rhythm input mode (0 = microphone, 1 = aux cable).
    """

    connected: Any
    active: Any
    hw_version: Any
    fw_version: Any
    mode: Any

    def as_dict(self) -> dict[str, Any]:
        """Return the record keyed the way the device API names the fields."""
        return {
            "connected": self.connected,
            "active": self.active,
            "hwVersion": self.hw_version,
            "fwVersion": self.fw_version,
            "mode": self.mode,
        }
