"""Configuration and settings persistence."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from dangerwrite.config.paths import get_paths
from dangerwrite.models.session import FailPolicy, GoalKind

logger = logging.getLogger(__name__)

DEFAULT_GRACE_SECONDS = 5
DEFAULT_GOAL_TIME_MINUTES = 3
DEFAULT_GOAL_WORD_COUNT = 150
DEFAULT_DISPLAY_FORMAT = "{progress}|{grace}"
DEFAULT_KILL_RING_MAX = 60


def get_config_dir() -> Path:
    """Get the dangerwrite config directory, creating if needed.

    Returns XDG-compliant path: ~/.config/dangerwrite/
    """
    config_dir = get_paths().global_config_dir
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_settings_path() -> Path:
    """Get the path to the settings file."""
    return get_paths().global_settings


def detect_terminal_theme() -> str:
    """Detect terminal light/dark preference."""
    # Check COLORFGBG env var (format: "fg;bg" where bg < 7 means dark)
    colorfgbg = os.environ.get("COLORFGBG", "")
    if colorfgbg:
        try:
            parts = colorfgbg.split(";")
            if len(parts) >= 2:
                bg = int(parts[-1])
                return "textual-light" if bg >= 7 else "textual-dark"
        except (ValueError, IndexError):
            pass
    return "textual-dark"


def is_valid_display_format(value: str) -> bool:
    """Whether a status template formats with ``progress`` and ``grace``."""
    try:
        value.format(progress="0", grace="0")
    except (KeyError, IndexError, ValueError):
        return False
    return True


class Settings:
    """Persistent settings for Dangerwrite."""

    _defaults: dict[str, Any] = {
        # theme intentionally not in defaults - we detect it
    }

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load settings from disk."""
        path = get_settings_path()
        if path.exists():
            try:
                self._data = json.loads(path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError):
                self._data = {}
        else:
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        path = get_settings_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s: %s", path, self._data)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a setting value, falling back to default."""
        return self._data.get(key, self._defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    def _get_bounded_int(self, key: str, default: int, minimum: int = 1) -> int:
        raw = self._data.get(key, default)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return default
        if value < minimum:
            return default
        return value

    @property
    def theme(self) -> str:
        """Get the current theme, detecting from terminal if not set."""
        saved = self._data.get("theme")
        if saved:
            return str(saved)
        return detect_terminal_theme()

    @theme.setter
    def theme(self, value: str) -> None:
        self.set("theme", value)

    # --- Session Settings ---

    @property
    def grace_seconds(self) -> int:
        """Seconds a writer may idle before the draft is destroyed.

        Zero is allowed: the draft goes after a single idle tick.
        """
        return self._get_bounded_int(
            "grace_seconds", DEFAULT_GRACE_SECONDS, minimum=0
        )

    @grace_seconds.setter
    def grace_seconds(self, value: int) -> None:
        if int(value) < 0:
            raise ValueError("grace_seconds must not be negative")
        self.set("grace_seconds", int(value))

    @property
    def fail_policy(self) -> FailPolicy:
        """Whether a stalled draft is killed (recoverable) or deleted."""
        raw = str(self._data.get("fail_policy", FailPolicy.KILL.value))
        try:
            return FailPolicy(raw.strip().lower())
        except ValueError:
            return FailPolicy.KILL

    @fail_policy.setter
    def fail_policy(self, value: FailPolicy | str) -> None:
        self.set("fail_policy", FailPolicy(value).value)

    @property
    def default_goal_time(self) -> int:
        """Minutes used by a time session started without an explicit goal."""
        return self._get_bounded_int("default_goal_time", DEFAULT_GOAL_TIME_MINUTES)

    @default_goal_time.setter
    def default_goal_time(self, value: int) -> None:
        if int(value) < 1:
            raise ValueError("default_goal_time must be at least 1")
        self.set("default_goal_time", int(value))

    @property
    def default_goal_word_count(self) -> int:
        """Words used by a word-count session started without an explicit goal."""
        return self._get_bounded_int(
            "default_goal_word_count", DEFAULT_GOAL_WORD_COUNT
        )

    @default_goal_word_count.setter
    def default_goal_word_count(self, value: int) -> None:
        if int(value) < 1:
            raise ValueError("default_goal_word_count must be at least 1")
        self.set("default_goal_word_count", int(value))

    @property
    def default_goal_kind(self) -> GoalKind:
        """Goal kind used when none is chosen explicitly."""
        raw = str(self._data.get("default_goal_kind", GoalKind.TIME.value))
        try:
            return GoalKind(raw.strip().lower())
        except ValueError:
            return GoalKind.TIME

    @default_goal_kind.setter
    def default_goal_kind(self, value: GoalKind | str) -> None:
        self.set("default_goal_kind", GoalKind(value).value)

    def default_goal_amount(self, goal_kind: GoalKind) -> int:
        """Configured default amount for a goal kind."""
        if goal_kind is GoalKind.WORD_COUNT:
            return self.default_goal_word_count
        return self.default_goal_time

    @property
    def display_format(self) -> str:
        """Status line template with ``{progress}`` and ``{grace}`` fields."""
        raw = self._data.get("display_format")
        if isinstance(raw, str) and is_valid_display_format(raw):
            return raw
        return DEFAULT_DISPLAY_FORMAT

    @display_format.setter
    def display_format(self, value: str) -> None:
        if not is_valid_display_format(value):
            raise ValueError(f"Invalid display format: {value!r}")
        self.set("display_format", value)

    @property
    def kill_ring_max(self) -> int:
        """How many killed drafts are kept for recovery."""
        return self._get_bounded_int("kill_ring_max", DEFAULT_KILL_RING_MAX)

    @kill_ring_max.setter
    def kill_ring_max(self, value: int) -> None:
        self.set("kill_ring_max", max(1, int(value)))

    @property
    def drafts_directory(self) -> Path:
        """Where drafts without a file are saved.

        Returns the configured directory, or defaults to the XDG data
        drafts directory.
        """
        saved = self._data.get("drafts_directory")
        if saved:
            return Path(saved).expanduser().resolve()
        return get_paths().drafts_dir

    @drafts_directory.setter
    def drafts_directory(self, value: str | Path) -> None:
        self.set("drafts_directory", str(value))


# Global settings instance
settings = Settings()
