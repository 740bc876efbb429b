"""Kill ring holding drafts cleared under the kill policy."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_KILL_RING_MAX = 60


class KillRing:
    """Bounded, newest-first store of killed text.

    Like an editor's kill ring, ``latest()`` returns the text at the yank
    pointer and ``rotate()`` moves the pointer to the next older entry.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_KILL_RING_MAX,
        *,
        mirror: Callable[[str], None] | None = None,
    ) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._entries: deque[str] = deque(maxlen=max_size)
        self._yank_index = 0
        self._mirror = mirror

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def max_size(self) -> int:
        return self._entries.maxlen or DEFAULT_KILL_RING_MAX

    @property
    def entries(self) -> list[str]:
        """All kills, newest first."""
        return list(self._entries)

    def push(self, text: str) -> None:
        """Add killed text; empty text is ignored."""
        if not text:
            return
        self._entries.appendleft(text)
        self._yank_index = 0
        logger.info("Killed %d characters (ring size %d)", len(text), len(self))
        if self._mirror is not None:
            self._mirror(text)

    def latest(self) -> str | None:
        """Text at the yank pointer, or None when the ring is empty."""
        if not self._entries:
            return None
        return self._entries[self._yank_index]

    def rotate(self) -> str | None:
        """Advance the yank pointer to the next older kill and return it."""
        if not self._entries:
            return None
        self._yank_index = (self._yank_index + 1) % len(self._entries)
        return self._entries[self._yank_index]

    def clear(self) -> None:
        self._entries.clear()
        self._yank_index = 0
