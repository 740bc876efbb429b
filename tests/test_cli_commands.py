from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from dangerwrite.cli import dispatch
from dangerwrite.cli.commands import cmd_config
from dangerwrite.cli.commands.tui import app_options
from dangerwrite.cli.parser import parse_args
from dangerwrite.config.settings import settings
from dangerwrite.models import FailPolicy, GoalKind


def test_app_options_for_word_session(tmp_path: Path) -> None:
    output = str(tmp_path / "d.txt")
    args = parse_args(
        ["words", "300", "--grace", "4", "--policy", "delete", "-o", output]
    )

    options = app_options(args)

    assert options == {
        "start_goal": GoalKind.WORD_COUNT,
        "goal_amount": 300,
        "grace_seconds": 4,
        "fail_policy": FailPolicy.DELETE,
        "output": (tmp_path / "d.txt").resolve(),
    }


def test_app_options_without_command_starts_idle() -> None:
    options = app_options(parse_args([]))

    assert options["start_goal"] is None
    assert options["goal_amount"] is None
    assert options["fail_policy"] is None


def test_dispatch_routes_sessions_to_tui(monkeypatch: pytest.MonkeyPatch) -> None:
    launched: list[dict[str, object]] = []

    class _FakeApp:
        def __init__(self, **kwargs: object) -> None:
            launched.append(kwargs)

        def run(self) -> None:
            return None

    import dangerwrite.tui.app as tui_app

    monkeypatch.setattr(tui_app, "DangerwriteApp", _FakeApp)

    assert dispatch(parse_args(["time", "5"])) == 0
    assert launched[0]["start_goal"] is GoalKind.TIME
    assert launched[0]["goal_amount"] == 5


def test_config_show_lists_settings(capsys: pytest.CaptureFixture[str]) -> None:
    settings._data = {"grace_seconds": 7}

    assert cmd_config(argparse.Namespace(config_action=None)) == 0

    out = capsys.readouterr().out
    assert "grace_seconds = 7" in out
    assert "fail_policy = kill" in out


def test_config_set_updates_setting(capsys: pytest.CaptureFixture[str]) -> None:
    args = parse_args(["config", "set", "default_goal_word_count", "250"])

    assert cmd_config(args) == 0

    assert settings.default_goal_word_count == 250
    assert "default_goal_word_count = 250" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("nonsense", "1"),
        ("grace_seconds", "abc"),
        ("fail_policy", "shred"),
        ("theme", "no-such-theme"),
    ],
)
def test_config_set_rejects_bad_input(
    key: str, value: str, capsys: pytest.CaptureFixture[str]
) -> None:
    args = parse_args(["config", "set", key, value])

    assert cmd_config(args) == 1
    assert "Error:" in capsys.readouterr().err


def test_config_set_rejected_theme_is_not_saved() -> None:
    settings._data = {}

    assert cmd_config(parse_args(["config", "set", "theme", "no-such-theme"])) == 1
    assert "theme" not in settings._data


def test_config_set_accepts_builtin_theme() -> None:
    assert cmd_config(parse_args(["config", "set", "theme", "textual-light"])) == 0
    assert settings.theme == "textual-light"


def _fake_app(
    monkeypatch: pytest.MonkeyPatch, launched: list[dict[str, object]]
) -> None:
    class _FakeApp:
        def __init__(self, **kwargs: object) -> None:
            launched.append(kwargs)

        def run(self) -> None:
            return None

    import dangerwrite.tui.app as tui_app

    monkeypatch.setattr(tui_app, "DangerwriteApp", _FakeApp)


def test_output_with_existing_work_is_refused(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    launched: list[dict[str, object]] = []
    _fake_app(monkeypatch, launched)
    novel = tmp_path / "novel.txt"
    novel.write_text("three chapters of prior work", encoding="utf-8")

    assert dispatch(parse_args(["words", "50", "-o", str(novel)])) == 1

    assert launched == []
    assert novel.read_text(encoding="utf-8") == "three chapters of prior work"
    assert "already exists" in capsys.readouterr().err


def test_output_may_be_an_empty_existing_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    launched: list[dict[str, object]] = []
    _fake_app(monkeypatch, launched)
    blank = tmp_path / "blank.txt"
    blank.touch()

    assert dispatch(parse_args(["words", "50", "-o", str(blank)])) == 0
    assert launched[0]["output"] == blank.resolve()
