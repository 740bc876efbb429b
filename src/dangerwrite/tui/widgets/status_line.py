"""Status line showing session progress and remaining grace."""

from __future__ import annotations

from textual.widgets import Static


class StatusLine(Static):
    """Single-line display slot the session engine overwrites every tick."""

    DEFAULT_CSS = """
    StatusLine {
        dock: bottom;
        width: 100%;
        height: 1;
        padding: 0 1;
        background: $panel;
        color: $text;
        text-style: bold;
    }

    StatusLine.-idle {
        color: $text-muted;
        text-style: none;
    }
    """

    def __init__(self, **kwargs: object) -> None:
        super().__init__("", markup=False, **kwargs)  # type: ignore[arg-type]
        self.add_class("-idle")
        self.status = ""

    def update(self, content: str = "") -> None:  # type: ignore[override]
        """Replace the status text; an empty string means no session."""
        self.status = content
        self.set_class(not content, "-idle")
        super().update(content)
