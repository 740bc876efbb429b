"""CLI command handlers."""

from .config import cmd_config
from .tui import cmd_tui

__all__ = [
    "cmd_config",
    "cmd_tui",
]
