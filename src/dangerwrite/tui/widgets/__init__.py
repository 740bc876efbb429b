"""TUI widgets for Dangerwrite."""

from .draft_area import DraftArea
from .status_line import StatusLine

__all__ = [
    "DraftArea",
    "StatusLine",
]
