from __future__ import annotations

from pathlib import Path

import pytest

from dangerwrite.cli.parser import parse_args


def test_parse_args_defaults_to_tui_mode() -> None:
    args = parse_args([])
    assert args.command is None
    assert args.grace is None
    assert args.policy is None
    assert args.output is None


def test_parse_args_time_with_minutes_and_options() -> None:
    args = parse_args(
        ["time", "10", "--grace", "8", "--policy", "delete", "-o", "novel.txt"]
    )
    assert args.command == "time"
    assert args.minutes == 10
    assert args.grace == 8
    assert args.policy == "delete"
    assert args.output == Path("novel.txt")


def test_parse_args_words_without_count_uses_settings_later() -> None:
    args = parse_args(["words"])
    assert args.command == "words"
    assert args.count is None


def test_parse_args_config_set() -> None:
    args = parse_args(["config", "set", "grace_seconds", "7"])
    assert args.command == "config"
    assert args.config_action == "set"
    assert args.key == "grace_seconds"
    assert args.value == "7"


@pytest.mark.parametrize(
    "argv",
    [
        ["time", "0"],
        ["words", "-5"],
        ["words", "lots"],
        ["time", "--grace", "-1"],
        ["time", "--policy", "shred"],
    ],
)
def test_parse_args_rejects_invalid_values(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        _ = parse_args(argv)


def test_zero_grace_is_accepted() -> None:
    args = parse_args(["words", "--grace", "0"])

    assert args.grace == 0
