"""
Exception hierarchy for the RainViewer client.

Every failure is raised to the caller; nothing here is retried.
"""

from __future__ import annotations

from typing import Optional


class RainViewerError(Exception):
    """Base exception for all client errors."""
    pass


class TransportError(RainViewerError):
    """Raised when the HTTP transport fails (DNS, connection reset, timeout...)."""
    pass


class DeserializationError(RainViewerError):
    """Raised when the manifest body is not the expected JSON document."""
    pass


class HttpStatusError(RainViewerError):
    """Raised when the server answers with anything other than 200."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = int(status_code)
        self.url = url
        msg = f"HTTP {self.status_code}"
        if url:
            msg += f" for {url}"
        super().__init__(msg)


class ParameterError(RainViewerError, ValueError):
    """
    Invalid request argument.

    Attributes:
        value: the offending value
        message: human readable explanation
    """

    def __init__(self, value: int, message: str):
        self.value = value
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidSize(ParameterError):
    pass


class InvalidZoom(ParameterError):
    pass


class XOutOfRange(ParameterError):
    pass


class YOutOfRange(ParameterError):
    pass
