"""Adapter layer package for the Marathon API boundary."""

from .interfaces import MarathonClientPort
from .marathon_client import MarathonClient
from .marathon_errors import (
	MarathonAdapterError,
	MarathonConfigurationError,
	MarathonDecodeError,
	MarathonHTTPStatusError,
	MarathonNetworkError,
	MarathonTimeoutError,
)

__all__ = [
	"MarathonAdapterError",
	"MarathonClient",
	"MarathonClientPort",
	"MarathonConfigurationError",
	"MarathonDecodeError",
	"MarathonHTTPStatusError",
	"MarathonNetworkError",
	"MarathonTimeoutError",
]
