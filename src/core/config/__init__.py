"""Configuration management for the classpath resolver."""

from src.core.config.loader import ConfigLoader
from src.core.config.settings import (
    GradleSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "GradleSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
