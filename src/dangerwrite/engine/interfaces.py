"""Collaborator contracts consumed by the session engine.

The engine never touches a widget, a timer library or the filesystem
directly; the TUI provides adapters for each of these.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Protocol


class TextSurface(Protocol):
    """The draft being timed."""

    @property
    def text(self) -> str: ...

    @property
    def length(self) -> int: ...

    @property
    def alive(self) -> bool: ...

    def word_count(self) -> int: ...

    def clear(self) -> None: ...

    def clear_history(self) -> None: ...

    def set_peak_marker(self, offset: int) -> None: ...

    def clear_peak_marker(self) -> None: ...

    def subscribe(self, callback: Callable[[int], None]) -> Callable[[], None]:
        """Call ``callback(length)`` after every edit; return an unsubscriber."""
        ...

    def save(self) -> Path | None:
        """Write to the backing location if there is one."""
        ...

    def close(self) -> None: ...


class TimerHandle(Protocol):
    """A cancellable repeating timer. Textual's ``Timer`` satisfies this."""

    def stop(self) -> None: ...


class Scheduler(Protocol):
    """Source of time and repeating callbacks."""

    def schedule_repeating(
        self, interval: float, callback: Callable[[], None]
    ) -> TimerHandle: ...

    def now(self) -> datetime: ...


class DisplaySink(Protocol):
    """A single status string slot. Textual's ``Static`` satisfies this."""

    def update(self, text: str) -> None: ...


class RecoverableStore(Protocol):
    """Where killed drafts go so they can be yanked back."""

    def push(self, text: str) -> None: ...

    def latest(self) -> str | None: ...


class Notifier(Protocol):
    """User notice channel, shaped like ``App.notify``."""

    def __call__(self, message: str, *, severity: str = "information") -> None: ...
