"""Project-native typed exceptions for Marathon API client failures."""

from __future__ import annotations


class MarathonAdapterError(Exception):
    """Base exception for adapter-level Marathon failures."""


class MarathonConfigurationError(MarathonAdapterError, ValueError):
    """Invalid location or protocol detected before any network attempt."""


class MarathonNetworkError(MarathonAdapterError, ConnectionError):
    """Transport-level connectivity failure (DNS, connect, read)."""


class MarathonTimeoutError(MarathonNetworkError, TimeoutError):
    """Transport timeout while waiting for a Marathon response."""


class MarathonHTTPStatusError(MarathonAdapterError, ConnectionError):
    """Non-2xx response returned by the Marathon API.

    Attributes:
        status_code: HTTP status code returned by upstream.
    """

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MarathonDecodeError(MarathonAdapterError, ValueError):
    """Empty, syntactically invalid, or wrongly shaped JSON response body."""
