"""Writing session state.

A session tracks progress toward a goal and how long the writer has gone
without producing new text. Only growth past the longest the draft has ever
been counts as productive; editing or deleting and retyping does not.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dangerwrite.engine.interfaces import TextSurface


class GoalKind(Enum):
    """What a session is working toward."""

    TIME = "time"
    WORD_COUNT = "words"


class FailPolicy(Enum):
    """What happens to the draft when the writer stalls."""

    KILL = "kill"  # Move the text to the kill ring before clearing
    DELETE = "delete"  # Clear with no recoverable copy


class InvalidGoalError(ValueError):
    """Raised for a non-positive goal or a negative grace period."""

    def __init__(
        self, field_name: str, value: int, requirement: str = "a positive integer"
    ) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(f"{field_name} must be {requirement}, got {value}")


@dataclass
class SessionState:
    """State of the single active writing session."""

    goal_kind: GoalKind
    goal_amount: int
    surface: TextSurface
    started_at: datetime
    last_productive_at: datetime
    grace_seconds: int = 5
    fail_policy: FailPolicy = FailPolicy.KILL
    deadline: datetime | None = None
    high_water_mark: int = 0

    def __post_init__(self) -> None:
        if self.goal_amount <= 0:
            raise InvalidGoalError("goal_amount", self.goal_amount)
        if self.grace_seconds < 0:
            raise InvalidGoalError(
                "grace_seconds", self.grace_seconds, "zero or more"
            )

    def observe_length(self, length: int, now: datetime) -> bool:
        """Record the draft's current length.

        Returns True when the draft grew past its previous peak, which is the
        only thing that resets the stall clock.
        """
        productive = length > self.high_water_mark
        if productive and now > self.last_productive_at:
            self.last_productive_at = now
        self.high_water_mark = max(self.high_water_mark, length)
        return productive
