"""Session engine: the tick loop and edit handler behind a writing session.

All callbacks run on the host's single event loop. Edits and ticks
interleave but never run concurrently, so nothing here is locked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import timedelta

from dangerwrite.engine.interfaces import (
    DisplaySink,
    Notifier,
    RecoverableStore,
    Scheduler,
    TextSurface,
    TimerHandle,
)
from dangerwrite.engine.progress import (
    format_grace,
    format_progress,
    goal_reached,
    remaining_grace,
    seconds_until,
)
from dangerwrite.models.session import (
    FailPolicy,
    GoalKind,
    InvalidGoalError,
    SessionState,
)

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_FORMAT = "{progress}|{grace}"
DEFAULT_GRACE_SECONDS = 5
TICK_INTERVAL = 1.0

TIME_EXPIRED_MESSAGE = "Time expired; the draft was destroyed"
FINISHED_MESSAGE = "Drafting finished"


def _log_notice(message: str, *, severity: str = "information") -> None:
    logger.info("Notice (%s): %s", severity, message)


class SessionEngine:
    """Owns the active session, its repeating tick and its edit subscription."""

    def __init__(
        self,
        *,
        scheduler: Scheduler,
        create_surface: Callable[[], TextSurface],
        display: DisplaySink,
        store: RecoverableStore,
        notify: Notifier | None = None,
        display_format: str = DEFAULT_DISPLAY_FORMAT,
        tick_interval: float = TICK_INTERVAL,
    ) -> None:
        self._scheduler = scheduler
        self._create_surface = create_surface
        self._display = display
        self._store = store
        self._notify: Notifier = notify or _log_notice
        self.display_format = display_format
        self.tick_interval = tick_interval
        self.state: SessionState | None = None
        self.start_hooks: list[Callable[[], None]] = []
        self.stop_hooks: list[Callable[[], None]] = []
        self._timer: TimerHandle | None = None
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def active(self) -> bool:
        return self.state is not None

    @property
    def store(self) -> RecoverableStore:
        return self._store

    def start_session(
        self,
        goal_kind: GoalKind,
        goal_amount: int,
        grace_seconds: int = DEFAULT_GRACE_SECONDS,
        fail_policy: FailPolicy = FailPolicy.KILL,
    ) -> SessionState:
        """Replace any running session with a fresh one on a new surface.

        Raises:
            InvalidGoalError: If goal_amount is not positive or grace_seconds is
                negative.
                Nothing is torn down or allocated in that case.
        """
        if goal_amount <= 0:
            raise InvalidGoalError("goal_amount", goal_amount)
        if grace_seconds < 0:
            raise InvalidGoalError("grace_seconds", grace_seconds, "zero or more")

        self.teardown()

        surface = self._create_surface()
        now = self._scheduler.now()
        deadline = None
        if goal_kind is GoalKind.TIME:
            deadline = now + timedelta(seconds=60 * goal_amount)

        state = SessionState(
            goal_kind=goal_kind,
            goal_amount=goal_amount,
            surface=surface,
            started_at=now,
            last_productive_at=now,
            grace_seconds=grace_seconds,
            fail_policy=fail_policy,
            deadline=deadline,
        )
        surface.clear_peak_marker()
        self._unsubscribe = surface.subscribe(self.on_text_mutated)
        self.state = state
        self._timer = self._scheduler.schedule_repeating(self.tick_interval, self.tick)
        logger.info(
            "Session started: goal=%s amount=%d grace=%ds policy=%s",
            goal_kind.value,
            goal_amount,
            grace_seconds,
            fail_policy.value,
        )
        self._run_hooks(self.start_hooks)
        self.tick()
        return state

    def on_text_mutated(self, current_length: int) -> None:
        """Edit handler; only growth past the peak resets the stall clock."""
        state = self.state
        if state is None:
            return
        if state.observe_length(current_length, self._scheduler.now()):
            logger.debug("Productive edit: peak now %d", state.high_water_mark)

    def progress(self) -> int | None:
        """Current progress: words written, or seconds left on the clock."""
        state = self.state
        if state is None:
            return None
        if state.goal_kind is GoalKind.WORD_COUNT:
            return state.surface.word_count()
        assert state.deadline is not None
        return seconds_until(state.deadline, self._scheduler.now())

    def tick(self) -> None:
        """Evaluate the session once: refresh the display, then fail or finish."""
        state = self.state
        if state is None:
            return
        surface = state.surface
        if not surface.alive:
            logger.info("Draft surface is gone; ending session")
            self.teardown()
            return

        now = self._scheduler.now()
        progress = self.progress()
        assert progress is not None
        grace = remaining_grace(
            state.grace_seconds, state.last_productive_at, now, self.tick_interval
        )

        # Edits that bypassed the subscription still count.
        state.observe_length(surface.length, now)
        surface.set_peak_marker(state.high_water_mark)

        self._display.update(
            self.display_format.format(
                progress=format_progress(state.goal_kind, state.goal_amount, progress),
                grace=format_grace(grace),
            )
        )

        if grace <= 0:
            self.fail()
        elif goal_reached(state.goal_kind, state.goal_amount, progress):
            self.finish()

    def fail(self) -> None:
        """Destroy the draft, end the session and report the expiry."""
        state = self.state
        if state is None:
            return
        surface = state.surface
        text = surface.text
        logger.info(
            "Writer stalled; destroying %d characters (policy=%s)",
            len(text),
            state.fail_policy.value,
        )
        if state.fail_policy is FailPolicy.KILL:
            self._store.push(text)
        surface.clear()
        surface.clear_history()
        self.teardown()

        try:
            surface.save()
        except OSError as e:
            logger.error("Failed to save cleared draft: %s", e)
            self._notify(f"{TIME_EXPIRED_MESSAGE} (save failed: {e})", severity="error")
            return
        finally:
            surface.close()
        self._notify(TIME_EXPIRED_MESSAGE, severity="warning")

    def finish(self) -> None:
        """End the session successfully."""
        if self.state is None:
            return
        logger.info("Goal reached")
        self.teardown()
        self._notify(FINISHED_MESSAGE, severity="information")

    def stop(self) -> None:
        """Explicitly stop the active session, leaving the draft intact."""
        if self.state is not None:
            logger.info("Session stopped by user")
        self.teardown()

    def teardown(self) -> None:
        """Cancel the tick and drop the session. Safe to call when idle."""
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        state = self.state
        if state is not None:
            state.surface.clear_peak_marker()
        self._display.update("")
        self.state = None
        if state is not None:
            self._run_hooks(self.stop_hooks)

    def yank(self) -> str | None:
        """Most recently killed draft, if any."""
        return self._store.latest()

    def _run_hooks(self, hooks: list[Callable[[], None]]) -> None:
        for hook in list(hooks):
            try:
                hook()
            except Exception:
                logger.exception("Session hook %r failed", hook)
