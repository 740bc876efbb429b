"""Main Dangerwrite TUI application."""

import logging
from pathlib import Path
from typing import Any

from textual.app import App
from textual.binding import Binding
from textual.command import DiscoveryHit, Hit, Hits, Provider

from dangerwrite.config import settings
from dangerwrite.config.settings import detect_terminal_theme
from dangerwrite.engine import KillRing
from dangerwrite.models import FailPolicy, GoalKind
from dangerwrite.tui.screens.writing import WritingScreen

logger = logging.getLogger(__name__)


class DangerwriteCommands(Provider):
    """Command provider for session commands."""

    def _commands(self) -> list[tuple[str, Any, str]]:
        default_kind = settings.default_goal_kind
        return [
            (
                "Start session",
                lambda: self._start(default_kind),
                f"Start a {default_kind.value} session with the default goal",
            ),
            (
                "Start timed session",
                lambda: self._start(GoalKind.TIME),
                f"Write for {settings.default_goal_time} minutes",
            ),
            (
                "Start word-count session",
                lambda: self._start(GoalKind.WORD_COUNT),
                f"Write {settings.default_goal_word_count} words",
            ),
            ("Stop session", self._stop, "Stop the running session"),
            ("Settings", self._open_settings, "Open application settings"),
        ]

    async def discover(self) -> Hits:
        """Return default commands shown before user input."""
        for name, callback, help_text in self._commands():
            yield DiscoveryHit(name, callback, help=help_text)

    async def search(self, query: str) -> Hits:
        """Search for Dangerwrite commands."""
        matcher = self.matcher(query)
        for name, callback, help_text in self._commands():
            match = matcher.match(name)
            if match > 0:
                yield Hit(match, matcher.highlight(name), callback, help=help_text)

    def _writing_screen(self) -> WritingScreen | None:
        for screen in self.app.screen_stack:
            if isinstance(screen, WritingScreen):
                return screen
        return None

    def _start(self, goal_kind: GoalKind) -> None:
        screen = self._writing_screen()
        if screen is not None:
            screen.start_session(goal_kind)

    def _stop(self) -> None:
        screen = self._writing_screen()
        if screen is not None:
            screen.action_stop()

    async def _open_settings(self) -> None:
        """Open the settings modal."""
        from dangerwrite.tui.screens.settings import SettingsModal

        self.app.push_screen(SettingsModal())


class DangerwriteApp(App[None]):
    """Main Dangerwrite TUI application."""

    TITLE = "Dangerwrite"
    SUB_TITLE = "Keep writing or lose it"

    COMMANDS = App.COMMANDS | {DangerwriteCommands}

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        *,
        start_goal: GoalKind | None = None,
        goal_amount: int | None = None,
        grace_seconds: int | None = None,
        fail_policy: FailPolicy | None = None,
        output: Path | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.kill_ring = KillRing(settings.kill_ring_max, mirror=self.copy_to_clipboard)
        self._start_goal = start_goal
        self._goal_amount = goal_amount
        self._grace_seconds = grace_seconds
        self._fail_policy = fail_policy
        self._output = output

    def on_mount(self) -> None:
        """Load the theme and open the writing screen."""
        saved_theme = settings.theme
        if saved_theme not in self.available_themes:
            logger.warning("Saved theme %r is not registered", saved_theme)
            saved_theme = detect_terminal_theme()
        logger.info("Loading saved theme: %s", saved_theme)
        self.theme = saved_theme

        self.push_screen(
            WritingScreen(
                kill_ring=self.kill_ring,
                start_goal=self._start_goal,
                goal_amount=self._goal_amount,
                grace_seconds=self._grace_seconds,
                fail_policy=self._fail_policy,
                output=self._output,
            )
        )
