"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class MarathonSettings(BaseSettings):
    """Marathon connection and registration naming settings.

    Environment variable names are field names in uppercase with a `MARATHON_`
    prefix. Example: `location` reads from `MARATHON_LOCATION`.

    Attributes:
        location: Marathon network location as `host:port`.
        protocol: `http` or `https`.
        username: Optional basic-auth username.
        password: Optional basic-auth password.
        verify_ssl: Whether TLS certificates are verified.
        request_timeout_seconds: Transport timeout for each request.
        consul_name_separator: Separator joining app id segments into service names.
    """

    model_config = SettingsConfigDict(
        env_prefix="MARATHON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    location: str = Field(default="localhost:8080", min_length=1)
    protocol: str = Field(default="http")
    username: str | None = Field(default=None)
    password: str | None = Field(default=None)
    verify_ssl: bool = Field(default=True)
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    consul_name_separator: str = Field(default=".", min_length=1)

    @field_validator("location")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("protocol")
    @classmethod
    def _validate_protocol(cls, value: str) -> str:
        normalized_value = value.strip().lower()
        if normalized_value not in ("http", "https"):
            raise ValueError("protocol must be http or https")
        return normalized_value

    @field_validator("consul_name_separator")
    @classmethod
    def _validate_separator(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("consul_name_separator must not be blank")
        return value


def config_load_settings() -> MarathonSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        MarathonSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        return MarathonSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
