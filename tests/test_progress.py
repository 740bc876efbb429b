"""Tests for progress and stall-clock arithmetic."""

from datetime import UTC, datetime, timedelta

import pytest

from dangerwrite.engine.progress import (
    count_words,
    format_grace,
    format_progress,
    goal_reached,
    grace_leniency,
    remaining_grace,
    seconds_elapsed,
    seconds_until,
)
from dangerwrite.models import GoalKind

T0 = datetime(2026, 3, 1, 9, 0, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("   \n\t", 0),
        ("one", 1),
        ("one two  three\nfour", 4),
        ("don't stop", 2),
        ("well—then, ok.", 3),
    ],
)
def test_count_words(text: str, expected: int) -> None:
    assert count_words(text) == expected


def test_seconds_elapsed_truncates() -> None:
    assert seconds_elapsed(T0, T0 + timedelta(seconds=2.9)) == 2


def test_seconds_until_rounds_up_and_goes_negative() -> None:
    assert seconds_until(T0 + timedelta(seconds=0.2), T0) == 1
    assert seconds_until(T0, T0 + timedelta(seconds=3)) == -3


def test_remaining_grace_includes_one_tick_of_leniency() -> None:
    assert remaining_grace(5, T0, T0) == 6
    assert remaining_grace(5, T0, T0 + timedelta(seconds=6)) == 0


def test_leniency_follows_tick_period() -> None:
    assert grace_leniency(1.0) == 1
    assert grace_leniency(0.5) == 1
    assert grace_leniency(2.0) == 2


def test_goal_reached_boundaries() -> None:
    assert goal_reached(GoalKind.WORD_COUNT, 10, 10)
    assert not goal_reached(GoalKind.WORD_COUNT, 10, 9)
    assert goal_reached(GoalKind.TIME, 3, 0)
    assert goal_reached(GoalKind.TIME, 3, -2)
    assert not goal_reached(GoalKind.TIME, 3, 1)


def test_format_progress() -> None:
    assert format_progress(GoalKind.WORD_COUNT, 150, 42) == "42/150"
    assert format_progress(GoalKind.TIME, 3, 125) == "2:05"
    assert format_progress(GoalKind.TIME, 3, -4) == "0:00"


def test_format_grace_never_negative() -> None:
    assert format_grace(4) == "4"
    assert format_grace(-1) == "0"
