"""Data models for Dangerwrite."""

from dangerwrite.models.session import (
    FailPolicy,
    GoalKind,
    InvalidGoalError,
    SessionState,
)

__all__ = [
    "FailPolicy",
    "GoalKind",
    "InvalidGoalError",
    "SessionState",
]
