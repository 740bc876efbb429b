"""Centralized path management for Dangerwrite.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/dangerwrite (default: ~/.config/dangerwrite)
- Data: $XDG_DATA_HOME/dangerwrite (default: ~/.local/share/dangerwrite)
- State: $XDG_STATE_HOME/dangerwrite (default: ~/.local/state/dangerwrite)
"""

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _xdg_data_home() -> Path:
    """Get XDG_DATA_HOME, defaulting to ~/.local/share."""
    return Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def _xdg_state_home() -> Path:
    """Get XDG_STATE_HOME, defaulting to ~/.local/state."""
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


@dataclass
class DangerwritePaths:
    """Centralized path management following XDG spec."""

    _config_home: Path = field(default_factory=_xdg_config_home)
    _data_home: Path = field(default_factory=_xdg_data_home)
    _state_home: Path = field(default_factory=_xdg_state_home)

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/dangerwrite/"""
        return self._config_home / "dangerwrite"

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/dangerwrite/settings.json"""
        return self.global_config_dir / "settings.json"

    @property
    def global_data_dir(self) -> Path:
        """Global data: ~/.local/share/dangerwrite/"""
        return self._data_home / "dangerwrite"

    @property
    def global_state_dir(self) -> Path:
        """Global state: ~/.local/state/dangerwrite/"""
        return self._state_home / "dangerwrite"

    @property
    def drafts_dir(self) -> Path:
        """Default location for saved drafts."""
        return self.global_data_dir / "drafts"

    @property
    def debug_log(self) -> Path:
        """Debug log: ~/.local/state/dangerwrite/debug.log"""
        return self.global_state_dir / "debug.log"

    def new_draft_file(
        self, directory: Path | None = None, now: datetime | None = None
    ) -> Path:
        """Timestamped path for a draft that has no file yet.

        A counter suffix is added when a draft from the same second exists.
        """
        directory = directory or self.drafts_dir
        stem = "draft-" + (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
        path = directory / f"{stem}.txt"
        counter = 1
        while path.exists():
            counter += 1
            path = directory / f"{stem}-{counter}.txt"
        return path

    def ensure_global_dirs(self) -> None:
        """Create global XDG directories."""
        self.global_config_dir.mkdir(parents=True, exist_ok=True)
        self.global_data_dir.mkdir(parents=True, exist_ok=True)
        self.global_state_dir.mkdir(parents=True, exist_ok=True)


# Singleton instance
_paths: DangerwritePaths | None = None


def get_paths() -> DangerwritePaths:
    """Get the paths singleton, creating it on first call."""
    global _paths
    if _paths is None:
        _paths = DangerwritePaths()
    return _paths


def reset_paths() -> None:
    """Reset paths singleton (for testing)."""
    global _paths
    _paths = None
