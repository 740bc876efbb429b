"""Session engine and its supporting pieces."""

from dangerwrite.engine.kill_ring import KillRing
from dangerwrite.engine.progress import count_words, goal_reached, remaining_grace
from dangerwrite.engine.session_engine import (
    DEFAULT_DISPLAY_FORMAT,
    FINISHED_MESSAGE,
    TIME_EXPIRED_MESSAGE,
    SessionEngine,
)

__all__ = [
    "DEFAULT_DISPLAY_FORMAT",
    "FINISHED_MESSAGE",
    "KillRing",
    "SessionEngine",
    "TIME_EXPIRED_MESSAGE",
    "count_words",
    "goal_reached",
    "remaining_grace",
]
