"""Configuration package for runtime settings and startup validation."""

from .settings import EntryMapperSettings, SettingsLoadError, config_configure_logging, config_load_settings

__all__ = ["EntryMapperSettings", "SettingsLoadError", "config_configure_logging", "config_load_settings"]
