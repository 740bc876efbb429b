"""Progress and stall-clock arithmetic for writing sessions."""

from __future__ import annotations

import math
import re
from datetime import datetime

from dangerwrite.models.session import GoalKind

# One tick of leniency so a tick landing exactly on the grace boundary
# does not fail the writer early.
GRACE_LENIENCY_TICKS = 1

_WORD_RE = re.compile(r"\w+(?:['’]\w+)*")


def count_words(text: str) -> int:
    """Count words, treating contractions like ``don't`` as one word."""
    return len(_WORD_RE.findall(text))


def seconds_elapsed(since: datetime, now: datetime) -> int:
    """Whole seconds from ``since`` to ``now``, truncated."""
    return int((now - since).total_seconds())


def seconds_until(deadline: datetime, now: datetime) -> int:
    """Seconds left before ``deadline``, rounded up. Negative once passed."""
    return math.ceil((deadline - now).total_seconds())


def grace_leniency(tick_interval: float) -> int:
    """Seconds of leniency matching one tick period."""
    return math.ceil(GRACE_LENIENCY_TICKS * tick_interval)


def remaining_grace(
    grace_seconds: int,
    last_productive_at: datetime,
    now: datetime,
    tick_interval: float = 1.0,
) -> int:
    """Seconds the writer may still idle before the draft is destroyed."""
    return (
        grace_seconds
        - seconds_elapsed(last_productive_at, now)
        + grace_leniency(tick_interval)
    )


def goal_reached(goal_kind: GoalKind, goal_amount: int, progress: int) -> bool:
    """Word goals count up to the target; time goals count down to zero."""
    if goal_kind is GoalKind.WORD_COUNT:
        return progress >= goal_amount
    return progress <= 0


def format_progress(goal_kind: GoalKind, goal_amount: int, progress: int) -> str:
    """Render progress for the status line."""
    if goal_kind is GoalKind.WORD_COUNT:
        return f"{progress}/{goal_amount}"
    remaining = max(0, progress)
    minutes, seconds = divmod(remaining, 60)
    return f"{minutes}:{seconds:02d}"


def format_grace(grace: int) -> str:
    """Render the remaining grace for the status line."""
    return str(max(0, grace))
