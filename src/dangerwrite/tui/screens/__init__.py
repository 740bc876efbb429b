"""TUI screens for Dangerwrite."""
from __future__ import annotations

from .settings import SettingsModal
from .writing import WritingScreen

__all__ = [
    "SettingsModal",
    "WritingScreen",
]
