"""Text area that hosts a timed draft."""

from __future__ import annotations

from typing import Any

from textual.widgets import TextArea


class DraftArea(TextArea):
    """Draft editor that shows where the writer's peak length sits.

    The peak is a zero-width position: writing only earns credit once the
    text grows past it. The border subtitle shows its location, or how many
    characters remain to reach it while the draft is shorter than the peak
    (the ``-below-peak`` class is set then too).
    """

    DEFAULT_CSS = """
    DraftArea {
        width: 100%;
        height: 1fr;
        border: round $primary;
        background: transparent;
        padding: 0 1;
    }

    DraftArea:focus {
        border: round $accent;
    }

    DraftArea.-below-peak {
        border: round $warning;
    }

    DraftArea.-below-peak:focus {
        border: round $warning;
    }
    """

    def __init__(self, text: str = "", **kwargs: Any) -> None:
        super().__init__(text, soft_wrap=True, **kwargs)
        self.peak_offset: int | None = None
        self.gone = False

    def mark_peak(self, offset: int | None) -> None:
        """Place (or with None, remove) the peak marker."""
        self.peak_offset = offset
        self.refresh_peak()

    def refresh_peak(self) -> None:
        """Re-render the peak marker against the current text."""
        offset = self.peak_offset
        if offset is None:
            self.border_subtitle = ""
            self.remove_class("-below-peak")
            return
        length = len(self.text)
        below_peak = length < offset
        if below_peak:
            self.border_subtitle = f"{offset - length} to peak"
        else:
            row, column = self.document.get_location_from_index(offset)
            self.border_subtitle = f"peak {row + 1}:{column + 1}"
        self.set_class(below_peak, "-below-peak")

    def on_unmount(self) -> None:
        self.gone = True
