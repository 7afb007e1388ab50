"""Custom exceptions for pynanoleaf library."""

from __future__ import annotations


class NanoleafError(Exception):
    """Base exception for all Nanoleaf errors."""


class RequestError(NanoleafError):
    """Exception raised when a request to the device fails.

    Covers non-success statuses on reads and response bodies that cannot be
    decoded as JSON.

    Attributes:
        status: Optional HTTP status returned by the device.
    """

    def __init__(self, message: str = "", status: int | None = None) -> None:
        """Initialize RequestError.

        Args:
            message: Error message.
            status: Optional HTTP status returned by the device.
        """
        super().__init__(message)
        self.status = status


class NanoleafConnectionError(RequestError):
    """Exception raised for connection failures."""


class NanoleafTimeoutError(RequestError):
    """Exception raised when a request or the readiness probe times out."""


class NotReadyError(NanoleafError):
    """Exception raised when a request is issued before the client is ready.

    Wait for the client's ``ready`` event (or ``wait_ready()``) and retry.
    """
