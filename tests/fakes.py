"""Hand-written collaborators for driving the session engine in tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from pathlib import Path

from dangerwrite.engine.progress import count_words


@dataclass
class FakeTimer:
    interval: float
    callback: Callable[[], None]
    stop_calls: int = 0

    @property
    def stopped(self) -> bool:
        return self.stop_calls > 0

    def stop(self) -> None:
        self.stop_calls += 1


@dataclass
class FakeScheduler:
    """Manual clock; ``advance`` moves time and fires live timers."""

    current: datetime = field(
        default_factory=lambda: datetime(2026, 3, 1, 9, 0, 0, tzinfo=UTC)
    )
    timers: list[FakeTimer] = field(default_factory=list)

    def now(self) -> datetime:
        return self.current

    def schedule_repeating(
        self, interval: float, callback: Callable[[], None]
    ) -> FakeTimer:
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer

    def shift(self, seconds: float) -> None:
        """Move time without firing timers."""
        self.current += timedelta(seconds=seconds)

    def advance(self, seconds: float = 1.0) -> None:
        self.shift(seconds)
        for timer in list(self.timers):
            if not timer.stopped:
                timer.callback()


@dataclass
class FakeSurface:
    text: str = ""
    alive: bool = True
    path: Path | None = None
    save_error: OSError | None = None
    marker: int | None = None
    history_cleared: bool = False
    save_calls: int = 0
    closed: bool = False
    subscribers: list[Callable[[int], None]] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.text)

    def type(self, more: str) -> None:
        self.text += more
        self._emit()

    def backspace(self, count: int = 1) -> None:
        self.text = self.text[:-count]
        self._emit()

    def _emit(self) -> None:
        for callback in list(self.subscribers):
            callback(self.length)

    def word_count(self) -> int:
        return count_words(self.text)

    def clear(self) -> None:
        self.text = ""

    def clear_history(self) -> None:
        self.history_cleared = True

    def set_peak_marker(self, offset: int) -> None:
        self.marker = offset

    def clear_peak_marker(self) -> None:
        self.marker = None

    def subscribe(self, callback: Callable[[int], None]) -> Callable[[], None]:
        self.subscribers.append(callback)
        return lambda: self.subscribers.remove(callback)

    def save(self) -> Path | None:
        self.save_calls += 1
        if self.save_error is not None:
            raise self.save_error
        return self.path

    def close(self) -> None:
        self.closed = True
        self.alive = False


@dataclass
class FakeDisplay:
    values: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return self.values[-1] if self.values else ""

    def update(self, text: str) -> None:
        self.values.append(text)


@dataclass
class RecordingNotifier:
    notices: list[tuple[str, str]] = field(default_factory=list)

    def __call__(self, message: str, *, severity: str = "information") -> None:
        self.notices.append((message, severity))
