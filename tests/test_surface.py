"""Tests for the Textual text-surface adapter."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC
from pathlib import Path
from typing import Any

import pytest

from dangerwrite.tui.surface import TextAreaSurface, TextualScheduler


@dataclass
class _FakeHistory:
    cleared: bool = False

    def clear(self) -> None:
        self.cleared = True


@dataclass
class _FakeArea:
    text: str = ""
    gone: bool = False
    is_mounted: bool = True
    removed: bool = False
    peak: int | None = None
    peak_refreshes: int = 0
    history: _FakeHistory = field(default_factory=_FakeHistory)

    def clear(self) -> None:
        self.text = ""

    def mark_peak(self, offset: int | None) -> None:
        self.peak = offset

    def refresh_peak(self) -> None:
        self.peak_refreshes += 1

    def remove(self) -> None:
        self.removed = True


def make_surface(
    text: str = "", path: Path | None = None
) -> tuple[TextAreaSurface, Any]:
    area = _FakeArea(text=text)
    return TextAreaSurface(area, path=path), area  # type: ignore[arg-type]


def test_reports_length_and_words() -> None:
    surface, _ = make_surface("two words")

    assert surface.length == 9
    assert surface.word_count() == 2
    assert surface.alive


def test_subscribers_receive_length_until_unsubscribed() -> None:
    surface, area = make_surface()
    lengths: list[int] = []
    unsubscribe = surface.subscribe(lengths.append)

    area.text = "abc"
    surface.notify_changed()
    unsubscribe()
    unsubscribe()
    area.text = "abcd"
    surface.notify_changed()

    assert lengths == [3]
    assert area.peak_refreshes == 2


def test_clear_and_history_and_marker_delegate_to_area() -> None:
    surface, area = make_surface("text")

    surface.set_peak_marker(4)
    assert area.peak == 4
    surface.clear()
    surface.clear_history()
    surface.clear_peak_marker()

    assert area.text == ""
    assert area.history.cleared
    assert area.peak is None


def test_scratch_draft_save_is_a_no_op() -> None:
    surface, _ = make_surface("unsaved")

    assert surface.save() is None
    assert surface.dirty


def test_save_writes_file_and_clears_dirty(tmp_path: Path) -> None:
    path = tmp_path / "drafts" / "story.txt"
    surface, area = make_surface("Once upon a time", path)

    assert surface.save() == path
    assert path.read_text(encoding="utf-8") == "Once upon a time"
    assert not surface.dirty

    area.text += "."
    assert surface.dirty


def test_save_propagates_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    surface, _ = make_surface("text", blocker / "story.txt")

    with pytest.raises(OSError):
        surface.save()


def test_close_removes_area_and_kills_surface() -> None:
    surface, area = make_surface("bye")
    surface.subscribe(lambda length: None)

    surface.close()

    assert not surface.alive
    assert area.removed


def test_area_unmount_makes_surface_gone() -> None:
    surface, area = make_surface()

    area.gone = True

    assert not surface.alive


def test_scheduler_uses_owner_interval_and_utc_clock() -> None:
    calls: list[tuple[float, Any, str]] = []

    class _FakeOwner:
        def set_interval(self, interval: float, callback: Any, *, name: str) -> str:
            calls.append((interval, callback, name))
            return "timer"

    scheduler = TextualScheduler(_FakeOwner())  # type: ignore[arg-type]

    def callback() -> None:
        return None

    assert scheduler.schedule_repeating(1.0, callback) == "timer"
    assert calls == [(1.0, callback, "session-tick")]
    assert scheduler.now().tzinfo is UTC
