"""Tests for the command line interface."""

import importlib
import shlex

from typeahead.cli import build_parser, build_web_parser
from typeahead.cli.run import resolve_config, run
from typeahead.cli.web import app_command, web


def test_parser_defaults_leave_config_untouched():
    args = build_parser().parse_args([])
    config = resolve_config(args)
    assert config.url is None
    assert config.delay == 300
    assert config.require_match is True


def test_parser_overrides():
    args = build_parser().parse_args(
        ["https://example.com/s", "--min-length", "2", "--delay", "50", "--no-require-match", "--submit-on-enter"]
    )
    config = resolve_config(args)
    assert config.url == "https://example.com/s"
    assert config.min_length == 2
    assert config.delay == 50
    assert config.require_match is False
    assert config.submit_on_enter is True


def test_command_line_beats_config_file(tmp_path):
    path = tmp_path / "ta.yaml"
    path.write_text("url: https://a.example/s\ndelay: 20\nqueryParam: term\n")
    args = build_parser().parse_args(["-c", str(path), "--delay", "40"])
    config = resolve_config(args)
    assert config.url == "https://a.example/s"
    assert config.delay == 40
    assert config.query_param == "term"


def test_run_reports_bad_config(tmp_path, capsys):
    args = build_parser().parse_args(["-c", str(tmp_path / "missing.yaml")])
    assert run(args) == 1
    assert "error:" in capsys.readouterr().err


def test_app_command_round_trips_settings():
    args = build_web_parser().parse_args(
        ["https://example.com/s", "--delay", "80", "--reveal-on-focus", "--no-reveal-on-keydown", "--port", "9000"]
    )
    command = shlex.split(app_command("/usr/bin/typeahead", args))
    assert command[:2] == ["/usr/bin/typeahead", "https://example.com/s"]
    assert "--port" not in command

    replayed = resolve_config(build_parser().parse_args(command[1:]))
    assert replayed.delay == 80
    assert replayed.reveal_on_focus is True
    assert replayed.reveal_on_keydown is False


def test_web_needs_executable(monkeypatch, capsys):
    web_module = importlib.import_module("typeahead.cli.web")
    monkeypatch.setattr(web_module.shutil, "which", lambda name: None)
    args = build_web_parser().parse_args([])
    assert web(args) == 1
    assert "not found" in capsys.readouterr().err
