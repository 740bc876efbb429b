"""Adapters binding the session engine to Textual."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from textual.message_pump import MessagePump
from textual.timer import Timer

from dangerwrite.engine.progress import count_words
from dangerwrite.tui.widgets.draft_area import DraftArea

logger = logging.getLogger(__name__)


class TextAreaSurface:
    """A ``DraftArea`` seen as the engine's text surface.

    The owning screen forwards ``TextArea.Changed`` to ``notify_changed``.
    """

    def __init__(self, area: DraftArea, *, path: Path | None = None) -> None:
        self.area = area
        self.path = path
        self._subscribers: list[Callable[[int], None]] = []
        self._closed = False
        self._saved_text = ""

    @property
    def text(self) -> str:
        return self.area.text

    @property
    def length(self) -> int:
        return len(self.area.text)

    @property
    def alive(self) -> bool:
        return not self._closed and not self.area.gone

    @property
    def dirty(self) -> bool:
        """Whether the text differs from what was last saved."""
        return self.text != self._saved_text

    def word_count(self) -> int:
        return count_words(self.text)

    def clear(self) -> None:
        self.area.clear()

    def clear_history(self) -> None:
        self.area.history.clear()

    def set_peak_marker(self, offset: int) -> None:
        self.area.mark_peak(offset)

    def clear_peak_marker(self) -> None:
        self.area.mark_peak(None)

    def subscribe(self, callback: Callable[[int], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify_changed(self) -> None:
        """Tell subscribers the draft changed."""
        length = self.length
        for callback in list(self._subscribers):
            callback(length)
        self.area.refresh_peak()

    def save(self) -> Path | None:
        """Write the draft to its file; no-op for scratch drafts."""
        if self.path is None:
            return None
        text = self.text
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        self._saved_text = text
        logger.info("Saved draft (%d characters) to %s", len(text), self.path)
        return self.path

    def close(self) -> None:
        """Discard the draft and remove its editor."""
        self._closed = True
        self._subscribers.clear()
        if self.area.is_mounted:
            self.area.remove()


class TextualScheduler:
    """Scheduler backed by a Textual message pump's timers."""

    def __init__(self, owner: MessagePump) -> None:
        self._owner = owner

    def schedule_repeating(self, interval: float, callback: Callable[[], None]) -> Timer:
        return self._owner.set_interval(interval, callback, name="session-tick")

    def now(self) -> datetime:
        return datetime.now(UTC)
