"""Configuration module with YAML and environment variable support."""

from .settings import Settings, StorageSettings, get_settings


__all__ = [
    "Settings",
    "StorageSettings",
    "get_settings",
]
