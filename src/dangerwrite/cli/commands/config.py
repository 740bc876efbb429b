"""Settings inspection and editing command."""

from __future__ import annotations

import argparse
import sys

from textual.theme import BUILTIN_THEMES

from dangerwrite.config import get_settings_path, settings

SETTING_KEYS = (
    "grace_seconds",
    "fail_policy",
    "default_goal_time",
    "default_goal_word_count",
    "default_goal_kind",
    "display_format",
    "kill_ring_max",
    "drafts_directory",
    "theme",
)

INT_KEYS = {
    "grace_seconds",
    "default_goal_time",
    "default_goal_word_count",
    "kill_ring_max",
}


def _display_value(key: str) -> str:
    value = getattr(settings, key)
    return str(getattr(value, "value", value))


def cmd_config(args: argparse.Namespace) -> int:
    """Show settings, or set one of them."""
    if args.config_action == "set":
        if args.key not in SETTING_KEYS:
            print(f"Error: Unknown setting '{args.key}'", file=sys.stderr)
            print(f"  Known settings: {', '.join(SETTING_KEYS)}", file=sys.stderr)
            return 1
        if args.key == "theme" and args.value not in BUILTIN_THEMES:
            print(f"Error: Unknown theme '{args.value}'", file=sys.stderr)
            known = ", ".join(sorted(BUILTIN_THEMES))
            print(f"  Known themes: {known}", file=sys.stderr)
            return 1
        try:
            value: object = int(args.value) if args.key in INT_KEYS else args.value
            setattr(settings, args.key, value)
        except ValueError as e:
            print(f"Error: Invalid value for {args.key}: {e}", file=sys.stderr)
            return 1
        print(f"{args.key} = {_display_value(args.key)}")
        return 0

    print(f"Settings file: {get_settings_path()}")
    for key in SETTING_KEYS:
        print(f"  {key} = {_display_value(key)}")
    return 0
