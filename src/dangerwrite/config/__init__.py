"""Configuration management for Dangerwrite."""
from __future__ import annotations

from dangerwrite.config.paths import DangerwritePaths, get_paths, reset_paths
from dangerwrite.config.settings import Settings, get_settings_path, settings

__all__ = [
    "DangerwritePaths",
    "Settings",
    "get_paths",
    "get_settings_path",
    "reset_paths",
    "settings",
]
