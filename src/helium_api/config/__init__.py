"""Configuration management for helium_api package."""

from .settings import Settings, settings, APISettings, APIUrls, ColumnSchemas, RICHEST_LIMIT

__all__ = [
    "Settings",
    "settings",
    "APISettings",
    "APIUrls",
    "ColumnSchemas",
    "RICHEST_LIMIT",
]
