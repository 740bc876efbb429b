"""Settings modal for session configuration."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static, Switch

from dangerwrite.config import get_settings_path, settings
from dangerwrite.config.settings import is_valid_display_format
from dangerwrite.models import FailPolicy, GoalKind

logger = logging.getLogger(__name__)

FAIL_POLICY_OPTIONS = [
    ("Kill (recoverable with Ctrl+R)", FailPolicy.KILL.value),
    ("Delete (gone for good)", FailPolicy.DELETE.value),
]

GOAL_KIND_OPTIONS = [
    ("Time", GoalKind.TIME.value),
    ("Word count", GoalKind.WORD_COUNT.value),
]


def _parse_int(raw: str, minimum: int = 1) -> int | None:
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= minimum else None


class SettingsModal(ModalScreen[None]):
    """Modal for viewing and editing session settings."""

    BINDINGS = [
        Binding("escape", "close", "Close", show=True),
    ]

    DEFAULT_CSS = """
    SettingsModal {
        align: center middle;
    }

    SettingsModal > Vertical {
        width: 70;
        max-width: 90%;
        height: auto;
        max-height: 85%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    SettingsModal .modal-title {
        text-align: center;
        text-style: bold;
        color: $text;
        padding-bottom: 1;
        border-bottom: solid $surface-lighten-1;
        margin-bottom: 1;
    }

    SettingsModal .settings-scroll {
        height: auto;
        max-height: 30;
    }

    SettingsModal .section-header {
        text-style: bold;
        color: $primary;
        padding: 1 0 0 0;
        margin-top: 1;
    }

    SettingsModal .setting-row {
        height: auto;
        padding: 1 0;
        border-bottom: solid $surface-lighten-1;
    }

    SettingsModal .setting-label {
        color: $text;
        text-style: bold;
    }

    SettingsModal .setting-description {
        color: $text-muted;
        margin-bottom: 1;
    }

    SettingsModal Input, SettingsModal Select {
        width: 100%;
        margin: 0;
    }

    SettingsModal .theme-row {
        height: auto;
        align: left middle;
    }

    SettingsModal .theme-row Label {
        margin-right: 2;
    }

    SettingsModal .file-path {
        color: $text-disabled;
        text-style: italic;
        padding: 1 0 0 0;
        text-align: center;
    }

    SettingsModal .button-row {
        padding-top: 1;
        align: center middle;
        height: auto;
    }

    SettingsModal .button-row Button {
        margin: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("Settings", classes="modal-title")

            with VerticalScroll(classes="settings-scroll"):
                yield Static("General", classes="section-header")

                with Vertical(classes="setting-row"):
                    yield Static("Theme", classes="setting-label")
                    yield Static(
                        "Application color theme", classes="setting-description"
                    )
                    with Horizontal(classes="theme-row"):
                        yield Label("Dark")
                        yield Switch(
                            value=settings.theme == "textual-dark", id="theme-switch"
                        )
                        yield Label("Light mode when OFF")

                with Vertical(classes="setting-row"):
                    yield Static("Status Format", classes="setting-label")
                    yield Static(
                        "Template with {progress} and {grace} fields",
                        classes="setting-description",
                    )
                    yield Input(value=settings.display_format, id="format-input")

                yield Static("Sessions", classes="section-header")

                with Vertical(classes="setting-row"):
                    yield Static("Grace Period", classes="setting-label")
                    yield Static(
                        "Seconds you may stop typing before the draft is destroyed",
                        classes="setting-description",
                    )
                    yield Input(value=str(settings.grace_seconds), id="grace-input")

                with Vertical(classes="setting-row"):
                    yield Static("On Failure", classes="setting-label")
                    yield Static(
                        "What happens to a stalled draft",
                        classes="setting-description",
                    )
                    yield Select(
                        FAIL_POLICY_OPTIONS,
                        value=settings.fail_policy.value,
                        allow_blank=False,
                        id="policy-select",
                    )

                with Vertical(classes="setting-row"):
                    yield Static("Default Goal", classes="setting-label")
                    yield Static(
                        "Goal kind used by the command palette",
                        classes="setting-description",
                    )
                    yield Select(
                        GOAL_KIND_OPTIONS,
                        value=settings.default_goal_kind.value,
                        allow_blank=False,
                        id="goal-kind-select",
                    )

                with Vertical(classes="setting-row"):
                    yield Static("Default Time Goal", classes="setting-label")
                    yield Static("Minutes", classes="setting-description")
                    yield Input(
                        value=str(settings.default_goal_time), id="goal-time-input"
                    )

                with Vertical(classes="setting-row"):
                    yield Static("Default Word Goal", classes="setting-label")
                    yield Static("Words", classes="setting-description")
                    yield Input(
                        value=str(settings.default_goal_word_count),
                        id="goal-words-input",
                    )

            yield Static(
                f"Settings file: {get_settings_path()}",
                classes="file-path",
            )

            with Horizontal(classes="button-row"):
                yield Button("Save", id="btn-save", variant="primary")
                yield Button("Close", id="btn-close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "btn-save" and not self._save_settings():
            return
        self.dismiss(None)

    def on_switch_changed(self, event: Switch.Changed) -> None:
        """Handle switch changes."""
        if event.switch.id == "theme-switch":
            new_theme = "textual-dark" if event.value else "textual-light"
            settings.theme = new_theme
            self.app.theme = new_theme

    def _save_settings(self) -> bool:
        """Validate and save all settings. Returns False if nothing was saved."""
        grace = _parse_int(self.query_one("#grace-input", Input).value, minimum=0)
        if grace is None:
            self.notify("Grace period must be zero or more seconds", severity="error")
            return False

        goal_time = _parse_int(self.query_one("#goal-time-input", Input).value)
        if goal_time is None:
            self.notify("Time goal must be a positive number", severity="error")
            return False

        goal_words = _parse_int(
            self.query_one("#goal-words-input", Input).value
        )
        if goal_words is None:
            self.notify("Word goal must be a positive number", severity="error")
            return False

        display_format = self.query_one("#format-input", Input).value
        if not is_valid_display_format(display_format):
            self.notify(
                "Status format may only use {progress} and {grace}", severity="error"
            )
            return False

        settings.grace_seconds = grace
        settings.default_goal_time = goal_time
        settings.default_goal_word_count = goal_words
        settings.display_format = display_format
        settings.fail_policy = str(self.query_one("#policy-select", Select).value)
        settings.default_goal_kind = str(
            self.query_one("#goal-kind-select", Select).value
        )

        self.notify("Settings saved", severity="information")
        logger.info(
            "Settings saved: grace=%ds, policy=%s",
            settings.grace_seconds,
            settings.fail_policy.value,
        )
        return True

    def action_close(self) -> None:
        """Close the modal."""
        self.dismiss(None)
