"""Regression tests for environment-driven Marathon settings and client bootstrap."""

from __future__ import annotations

import httpx
import pytest

from marathon_bridge.bootstrap import bootstrap_create_marathon_client
from marathon_bridge.config import MarathonSettings, SettingsLoadError, config_load_settings


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test without inherited MARATHON_* variables or a local .env file."""

    monkeypatch.chdir(tmp_path)
    for variable_name in (
        "MARATHON_LOCATION",
        "MARATHON_PROTOCOL",
        "MARATHON_USERNAME",
        "MARATHON_PASSWORD",
        "MARATHON_VERIFY_SSL",
        "MARATHON_REQUEST_TIMEOUT_SECONDS",
        "MARATHON_CONSUL_NAME_SEPARATOR",
    ):
        monkeypatch.delenv(variable_name, raising=False)


def test_config_load_settings_defaults() -> None:
    """Load defaults when no environment overrides exist.

    Returns:
        None: Assertions validate default values.

    Raises:
        AssertionError: Raised when defaults change unexpectedly.
    """

    settings = config_load_settings()

    assert settings.location == "localhost:8080"
    assert settings.protocol == "http"
    assert settings.username is None
    assert settings.verify_ssl is True
    assert settings.consul_name_separator == "."


def test_config_load_settings_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read and normalize MARATHON_-prefixed environment variables.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate environment mapping.

    Raises:
        AssertionError: Raised when environment values are not applied.
    """

    monkeypatch.setenv("MARATHON_LOCATION", " marathon.service:8443 ")
    monkeypatch.setenv("MARATHON_PROTOCOL", "HTTPS")
    monkeypatch.setenv("MARATHON_USERNAME", "peter")
    monkeypatch.setenv("MARATHON_PASSWORD", "parker")
    monkeypatch.setenv("MARATHON_VERIFY_SSL", "false")
    monkeypatch.setenv("MARATHON_CONSUL_NAME_SEPARATOR", "-")

    settings = config_load_settings()

    assert settings.location == "marathon.service:8443"
    assert settings.protocol == "https"
    assert settings.verify_ssl is False
    assert settings.consul_name_separator == "-"


@pytest.mark.parametrize(
    ("variable_name", "value"),
    [
        ("MARATHON_PROTOCOL", "ftp"),
        ("MARATHON_LOCATION", "   "),
        ("MARATHON_REQUEST_TIMEOUT_SECONDS", "0"),
        ("MARATHON_CONSUL_NAME_SEPARATOR", " "),
    ],
)
def test_config_load_settings_invalid_values_raise_load_error(
    monkeypatch: pytest.MonkeyPatch,
    variable_name: str,
    value: str,
) -> None:
    """Wrap validation failures into SettingsLoadError.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        variable_name: Environment variable to override.
        value: Invalid value.

    Returns:
        None: Assertions validate startup validation.

    Raises:
        AssertionError: Raised when invalid settings load successfully.
    """

    monkeypatch.setenv(variable_name, value)

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_bootstrap_create_marathon_client_uses_settings() -> None:
    """Wire settings into a client that builds authenticated URLs.

    Returns:
        None: Assertions validate bootstrap wiring.

    Raises:
        AssertionError: Raised when settings are not forwarded.
    """

    settings = MarathonSettings(location="marathon.service:8080", protocol="https", username="u", password="p")

    client = bootstrap_create_marathon_client(
        settings=settings,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b'{"leader": "l:1"}')),
    )

    assert client.adapter_url("/v2/leader") == "https://u:p@marathon.service:8080/v2/leader"
    assert client.adapter_leader() == "l:1"
