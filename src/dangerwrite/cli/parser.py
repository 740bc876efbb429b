"""Argument parser construction for Dangerwrite CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from dangerwrite.models.session import FailPolicy


def positive_int(raw: str) -> int:
    """argparse type accepting integers >= 1."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{raw}' is not an integer") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def non_negative_int(raw: str) -> int:
    """argparse type accepting integers >= 0."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{raw}' is not an integer") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def _session_options() -> argparse.ArgumentParser:
    """Options shared by the session-starting commands."""
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument(
        "--grace",
        type=non_negative_int,
        help="Seconds you may stop typing before the draft is destroyed",
    )
    options.add_argument(
        "--policy",
        choices=[policy.value for policy in FailPolicy],
        help="kill keeps a recoverable copy; delete does not",
    )
    options.add_argument(
        "--output",
        "-o",
        type=Path,
        help="File backing the draft (default: unsaved scratch draft)",
    )
    return options


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        description="Dangerwrite - keep writing or lose your draft"
    )
    parser.set_defaults(grace=None, policy=None, output=None)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    session_options = _session_options()

    time_parser = subparsers.add_parser(
        "time",
        parents=[session_options],
        help="Start a session with a time goal",
    )
    time_parser.add_argument(
        "minutes",
        nargs="?",
        type=positive_int,
        help="Minutes to write (default: from settings)",
    )

    words_parser = subparsers.add_parser(
        "words",
        parents=[session_options],
        help="Start a session with a word-count goal",
    )
    words_parser.add_argument(
        "count",
        nargs="?",
        type=positive_int,
        help="Words to write (default: from settings)",
    )

    config_parser = subparsers.add_parser(
        "config",
        help="Show or change settings",
    )
    config_subparsers = config_parser.add_subparsers(
        dest="config_action",
        help="Config actions",
    )
    config_subparsers.add_parser("show", help="Print current settings")
    set_parser = config_subparsers.add_parser("set", help="Change a setting")
    set_parser.add_argument("key", help="Setting name (e.g. grace_seconds)")
    set_parser.add_argument("value", help="New value")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments from argv (or sys.argv when omitted)."""
    parser = build_parser()
    if argv is None:
        return parser.parse_args()
    return parser.parse_args(list(argv))
