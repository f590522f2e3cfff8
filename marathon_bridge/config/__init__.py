"""Configuration package for runtime settings and startup validation."""

from .settings import MarathonSettings, SettingsLoadError, config_load_settings

__all__ = ["MarathonSettings", "SettingsLoadError", "config_load_settings"]
