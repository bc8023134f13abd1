"""
Exporter configuration.

Settings are loaded from environment variables or a `.env` file.
"""

from tfexporter.config.settings import (
    DEFAULT_PUSHGATEWAY_PORT,
    Settings,
    get_settings,
    load_settings,
)

__all__ = [
    "DEFAULT_PUSHGATEWAY_PORT",
    "Settings",
    "get_settings",
    "load_settings",
]
