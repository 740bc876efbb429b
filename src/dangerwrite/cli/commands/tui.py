"""TUI launch command."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dangerwrite.models import FailPolicy, GoalKind


def app_options(args: argparse.Namespace) -> dict[str, object]:
    """Translate parsed args into ``DangerwriteApp`` keyword arguments."""
    start_goal: GoalKind | None = None
    goal_amount: int | None = None
    if args.command == "time":
        start_goal = GoalKind.TIME
        goal_amount = args.minutes
    elif args.command == "words":
        start_goal = GoalKind.WORD_COUNT
        goal_amount = args.count

    return {
        "start_goal": start_goal,
        "goal_amount": goal_amount,
        "grace_seconds": args.grace,
        "fail_policy": FailPolicy(args.policy) if args.policy else None,
        "output": args.output.expanduser().resolve() if args.output else None,
    }


def _has_content(path: Path) -> bool:
    return path.exists() and (path.is_dir() or path.stat().st_size > 0)


def cmd_tui(args: argparse.Namespace) -> int:
    """Launch the TUI application."""
    from dangerwrite.tui.app import DangerwriteApp

    options = app_options(args)
    output = options["output"]
    # Drafts start empty; never back one with a file holding other work.
    if isinstance(output, Path) and _has_content(output):
        print(f"Error: {output} already exists and is not empty", file=sys.stderr)
        print("  Choose a new file for the draft", file=sys.stderr)
        return 1

    app = DangerwriteApp(**options)  # type: ignore[arg-type]
    app.run()
    return 0
