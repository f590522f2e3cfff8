"""Marathon REST API client with single-attempt, fail-fast request handling."""

from __future__ import annotations

import logging
from typing import Callable, Final, TypeVar
from urllib.parse import quote, urlencode, urlsplit

import httpx

from marathon_bridge.domain import (
    CONSUL_LABEL_KEY,
    App,
    DomainDecodeError,
    Task,
    domain_parse_app,
    domain_parse_apps,
    domain_parse_leader,
    domain_parse_tasks,
)

from .interfaces import MarathonClientPort
from .marathon_errors import (
    MarathonConfigurationError,
    MarathonDecodeError,
    MarathonHTTPStatusError,
    MarathonNetworkError,
    MarathonTimeoutError,
)

logger = logging.getLogger(__name__)

_ParsedT = TypeVar("_ParsedT")


class MarathonClient(MarathonClientPort):
    """Client for the Marathon `/v2` read endpoints.

    Every operation issues exactly one GET request. Transport failures, non-2xx
    responses, and undecodable bodies are raised to the caller without retry.
    The client holds only immutable configuration and a pooled `httpx.Client`,
    so one instance may be shared across threads.
    """

    _USER_AGENT: Final[str] = "marathon-bridge/1.0 (Python/httpx)"
    _SUPPORTED_PROTOCOLS: Final[frozenset[str]] = frozenset({"http", "https"})

    def __init__(
        self,
        location: str,
        protocol: str = "http",
        username: str | None = None,
        password: str | None = None,
        verify_ssl: bool = True,
        request_timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize Marathon client.

        Location and protocol are validated lazily by `adapter_url`, so a client
        with a malformed location can be built but fails every call before any
        network attempt.

        Args:
            location: Marathon network location as `host:port`.
            protocol: `http` or `https`, case-insensitive.
            username: Optional basic-auth username embedded into request URLs.
            password: Optional basic-auth password embedded into request URLs.
            verify_ssl: Whether TLS certificates are verified.
            request_timeout_seconds: Transport timeout applied to every request.
            transport: Optional httpx transport replacing the network layer.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when request_timeout_seconds is not positive.
        """

        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._location = location.strip()
        self._protocol = protocol.strip().lower()
        self._username = username or ""
        self._password = password or ""
        self._http_client = httpx.Client(
            verify=verify_ssl,
            timeout=request_timeout_seconds,
            headers={"User-Agent": self._USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

    def __enter__(self) -> MarathonClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.adapter_close()

    def adapter_close(self) -> None:
        """Release the pooled HTTP connections held by the client."""

        self._http_client.close()

    def adapter_url(self, path: str) -> str:
        """Build an absolute request URL for an API path.

        Args:
            path: API path, optionally with query string, e.g. `/v2/apps`.

        Returns:
            str: `scheme://[user:pass@]location/path`.

        Raises:
            MarathonConfigurationError: Raised when protocol or location is invalid.
        """

        if self._protocol not in self._SUPPORTED_PROTOCOLS:
            raise MarathonConfigurationError(f"Marathon protocol must be http or https, got {self._protocol!r}")
        self._adapter_validate_location()

        credentials = ""
        if self._username:
            credentials = f"{quote(self._username, safe='')}:{quote(self._password, safe='')}@"
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self._protocol}://{credentials}{self._location}{path}"

    def adapter_consul_apps(self) -> list[App]:
        query = urlencode({"embed": "apps.tasks", "label": CONSUL_LABEL_KEY})
        payload = self._adapter_http_get(self.adapter_url(f"/v2/apps?{query}"))
        return self._adapter_decode(domain_parse_apps, payload, context_label="apps")

    def adapter_app(self, app_id: str) -> App:
        query = urlencode({"embed": "apps.tasks"})
        payload = self._adapter_http_get(self.adapter_url(f"{self._adapter_app_path(app_id)}?{query}"))
        return self._adapter_decode(domain_parse_app, payload, context_label="app")

    def adapter_tasks(self, app_id: str) -> list[Task]:
        payload = self._adapter_http_get(self.adapter_url(f"{self._adapter_app_path(app_id)}/tasks"))
        return self._adapter_decode(domain_parse_tasks, payload, context_label="tasks")

    def adapter_leader(self) -> str:
        payload = self._adapter_http_get(self.adapter_url("/v2/leader"))
        return self._adapter_decode(domain_parse_leader, payload, context_label="leader")

    def _adapter_app_path(self, app_id: str) -> str:
        """Return the `/v2/apps/...` resource path for an app identifier.

        Args:
            app_id: App identifier, with or without leading slashes.

        Returns:
            str: Resource path with exactly one slash after `/v2/apps`.
        """

        return f"/v2/apps/{app_id.strip('/')}"

    def _adapter_validate_location(self) -> None:
        """Validate that the configured location is a bare `host[:port]` authority.

        Raises:
            MarathonConfigurationError: Raised when location cannot be parsed as an authority.
        """

        try:
            parsed_location = urlsplit(f"{self._protocol}://{self._location}")
            # accessing .port validates it is numeric and in range
            _ = parsed_location.port
        except ValueError as error:
            raise MarathonConfigurationError(f"Marathon location is invalid: {self._location!r}") from error

        if (
            not parsed_location.hostname
            or "@" in parsed_location.netloc
            or parsed_location.path
            or parsed_location.query
            or parsed_location.fragment
        ):
            raise MarathonConfigurationError(f"Marathon location is invalid: {self._location!r}")

    def _adapter_http_get(self, url: str) -> bytes:
        """Execute one HTTP GET and return response payload bytes.

        Args:
            url: Absolute request URL.

        Returns:
            bytes: HTTP response payload.

        Raises:
            MarathonTimeoutError: Raised when the transport times out.
            MarathonNetworkError: Raised for DNS, connect, and other transport failures.
            MarathonHTTPStatusError: Raised for non-2xx responses.
            MarathonConfigurationError: Raised when httpx rejects the URL.
        """

        request_path = url.split(self._location, 1)[-1]
        logger.debug("Marathon GET %s%s", self._location, request_path)
        try:
            response = self._http_client.get(url)
        except httpx.TimeoutException as error:
            raise MarathonTimeoutError(f"Marathon request timed out: {request_path}") from error
        except httpx.TransportError as error:
            raise MarathonNetworkError(f"Marathon request failed: {request_path}") from error
        except httpx.InvalidURL as error:
            raise MarathonConfigurationError(f"Marathon request URL is invalid: {request_path}") from error

        if not response.is_success:
            raise MarathonHTTPStatusError(
                f"Marathon returned HTTP {response.status_code} for {request_path}",
                status_code=response.status_code,
            )
        return response.content

    def _adapter_decode(
        self,
        parser: Callable[[bytes], _ParsedT],
        payload: bytes,
        context_label: str,
    ) -> _ParsedT:
        """Run a domain parser and translate decode failures.

        Args:
            parser: Domain parse function accepting payload bytes.
            payload: Response body.
            context_label: Context label for error messages.

        Returns:
            _ParsedT: Parser result.

        Raises:
            MarathonDecodeError: Raised when the payload cannot be decoded.
        """

        try:
            return parser(payload)
        except DomainDecodeError as error:
            raise MarathonDecodeError(f"Marathon response decode failed for context={context_label}: {error}") from error
