"""Writing screen: the draft editor driven by a session engine."""

import logging
from pathlib import Path

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static, TextArea

from dangerwrite.config import get_paths, settings
from dangerwrite.engine import KillRing, SessionEngine
from dangerwrite.models import FailPolicy, GoalKind, InvalidGoalError
from dangerwrite.tui.surface import TextAreaSurface, TextualScheduler
from dangerwrite.tui.widgets import DraftArea, StatusLine

logger = logging.getLogger(__name__)

IDLE_HINT = (
    "F5 starts a timed session, F6 a word-count session. "
    "Keep typing: stall too long and the draft is gone."
)


class WritingScreen(Screen[None]):
    """
    Writing screen - one draft per session.

    Every new session gets a fresh draft area. Text left over from the
    previous draft is pushed to the kill ring before that draft is retired.
    """

    BINDINGS = [
        Binding("f5", "start_time", "Timed", priority=True),
        Binding("f6", "start_words", "Words", priority=True),
        Binding("f8", "stop", "Stop", priority=True),
        Binding("ctrl+s", "save_draft", "Save", priority=True),
        Binding("ctrl+r", "yank", "Recover", priority=True),
        Binding("alt+r", "yank_older", "Older", show=False, priority=True),
    ]

    DEFAULT_CSS = """
    WritingScreen {
        background: $surface;
    }

    WritingScreen #draft-host {
        width: 100%;
        height: 1fr;
        padding: 1 2 0 2;
    }

    WritingScreen #idle-hint {
        color: $text-disabled;
        text-style: italic;
        padding: 1 0;
    }
    """

    def __init__(
        self,
        *,
        kill_ring: KillRing,
        start_goal: GoalKind | None = None,
        goal_amount: int | None = None,
        grace_seconds: int | None = None,
        fail_policy: FailPolicy | None = None,
        output: Path | None = None,
    ) -> None:
        super().__init__()
        self.kill_ring = kill_ring
        self.surface: TextAreaSurface | None = None
        self._engine: SessionEngine | None = None
        self._start_goal = start_goal
        self._goal_amount = goal_amount
        self._grace_seconds = grace_seconds
        self._fail_policy = fail_policy
        self._pending_output = output

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="draft-host"):
            yield Static(IDLE_HINT, id="idle-hint")
        yield StatusLine(id="status-line")
        yield Footer()

    @property
    def engine(self) -> SessionEngine:
        if self._engine is None:
            self._engine = SessionEngine(
                scheduler=TextualScheduler(self),
                create_surface=self._create_surface,
                display=self.query_one("#status-line", StatusLine),
                store=self.kill_ring,
                notify=self.notify,
                display_format=settings.display_format,
            )
            self._engine.start_hooks.append(self._on_session_start)
            self._engine.stop_hooks.append(self._on_session_stop)
        return self._engine

    def on_mount(self) -> None:
        """Start the session requested on the command line, if any."""
        self.app.sub_title = "Idle"
        if self._start_goal is not None:
            self.start_session(self._start_goal, self._goal_amount)

    def on_unmount(self) -> None:
        """Cancel the tick when leaving the screen."""
        if self._engine is not None:
            self._engine.teardown()

    def start_session(self, goal_kind: GoalKind, amount: int | None = None) -> bool:
        """Start a session, filling unspecified options from settings."""
        engine = self.engine
        engine.display_format = settings.display_format
        goal_amount = amount if amount is not None else settings.default_goal_amount(
            goal_kind
        )
        grace = (
            self._grace_seconds
            if self._grace_seconds is not None
            else settings.grace_seconds
        )
        policy = self._fail_policy or settings.fail_policy
        try:
            engine.start_session(goal_kind, goal_amount, grace, policy)
        except InvalidGoalError as e:
            logger.warning("Rejected session start: %s", e)
            self.notify(str(e), severity="warning")
            return False
        return True

    def _create_surface(self, text: str = "") -> TextAreaSurface:
        """Retire the current draft and mount a fresh one."""
        previous = self.surface
        if previous is not None and previous.alive:
            leftover = previous.text
            if previous.dirty and leftover != self.kill_ring.latest():
                self.kill_ring.push(leftover)
            previous.close()

        for hint in self.query("#idle-hint"):
            hint.display = False

        area = DraftArea(text)
        self.query_one("#draft-host", Vertical).mount(area)
        self.call_after_refresh(area.focus)

        surface = TextAreaSurface(area, path=self._pending_output)
        self._pending_output = None
        self.surface = surface
        return surface

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Route edits in the live draft to the session."""
        surface = self.surface
        if surface is not None and event.text_area is surface.area:
            surface.notify_changed()

    def _on_session_start(self) -> None:
        state = self.engine.state
        if state is None:
            return
        unit = "min" if state.goal_kind is GoalKind.TIME else "words"
        self.app.sub_title = f"Writing · {state.goal_amount} {unit}"

    def _on_session_stop(self) -> None:
        self.app.sub_title = "Idle"
        self.call_after_refresh(self._show_hint_if_empty)

    def _show_hint_if_empty(self) -> None:
        surface = self.surface
        if surface is None or not surface.alive:
            for hint in self.query("#idle-hint"):
                hint.display = True

    def action_start_time(self) -> None:
        self.start_session(GoalKind.TIME)

    def action_start_words(self) -> None:
        self.start_session(GoalKind.WORD_COUNT)

    def action_stop(self) -> None:
        if not self.engine.active:
            self.notify("No session is running", severity="warning")
            return
        self.engine.stop()
        self.notify("Session stopped")

    def action_save_draft(self) -> None:
        """Save the draft, giving scratch drafts a file in the drafts directory."""
        surface = self.surface
        if surface is None or not surface.alive:
            self.notify("No draft to save", severity="warning")
            return
        if surface.path is None:
            surface.path = get_paths().new_draft_file(settings.drafts_directory)
        try:
            path = surface.save()
        except OSError as e:
            logger.error("Failed to save draft: %s", e)
            self.notify(f"Failed to save draft: {e}", severity="error")
            return
        self.notify(f"Saved draft to {path}")

    def action_yank(self) -> None:
        self._insert_kill(self.engine.yank())

    def action_yank_older(self) -> None:
        self._insert_kill(self.kill_ring.rotate())

    def _insert_kill(self, text: str | None) -> None:
        if text is None:
            self.notify("Kill ring is empty", severity="warning")
            return
        surface = self.surface
        if surface is None or not surface.alive:
            self._create_surface(text)
            return
        surface.area.insert(text)
