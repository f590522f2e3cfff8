"""Bootstrap wiring from validated settings to the Marathon client."""

import httpx

from marathon_bridge.adapters import MarathonClient
from marathon_bridge.config import MarathonSettings, config_load_settings


def bootstrap_create_marathon_client(
    settings: MarathonSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> MarathonClient:
    """Build a Marathon client from runtime settings.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.
        transport: Optional httpx transport replacing the network layer.

    Returns:
        MarathonClient: Configured client instance.

    Raises:
        SettingsLoadError: Raised when settings validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return MarathonClient(
        location=resolved_settings.location,
        protocol=resolved_settings.protocol,
        username=resolved_settings.username,
        password=resolved_settings.password,
        verify_ssl=resolved_settings.verify_ssl,
        request_timeout_seconds=resolved_settings.request_timeout_seconds,
        transport=transport,
    )
