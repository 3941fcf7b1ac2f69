"""Common building blocks - canonical settings and value parsing."""

from .settings import Settings, SettingsBuilder, SettingsSource, to_settings
from .settings_loader import (
    JsonSettingsLoader,
    PropertiesSettingsLoader,
    YamlSettingsLoader,
    loader_from_source,
)
from .unit import format_time_value, parse_time_value

__all__ = [
    "Settings",
    "SettingsBuilder",
    "SettingsSource",
    "to_settings",
    "JsonSettingsLoader",
    "YamlSettingsLoader",
    "PropertiesSettingsLoader",
    "loader_from_source",
    "parse_time_value",
    "format_time_value",
]
