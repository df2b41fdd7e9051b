"""Configuration management."""

from .settings import (
    DisplaySettings,
    Settings,
    SettingsManager,
    SourceSettings,
    get_settings,
)

__all__ = [
    "DisplaySettings",
    "Settings",
    "SettingsManager",
    "SourceSettings",
    "get_settings",
]
