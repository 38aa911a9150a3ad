"""Tests for configuration validation and console logging helpers."""

import pytest

from gridsim.config import Config
from gridsim.logging_utils import (
    Color,
    LOG_TAG_ERROR,
    LOG_TAG_PENALTY,
    LOG_TAG_SUCCESS,
    colored,
    log_debug,
    log_error,
    log_penalty,
    log_success,
)


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.setenv("GRIDSIM_NO_COLOR", "1")
    assert colored("plain", Color.GREEN, bold=True) == "plain"

    monkeypatch.delenv("GRIDSIM_NO_COLOR")
    text = colored("paint", Color.GREEN, bold=True)
    assert text.startswith(Color.BOLD.value + Color.GREEN.value)
    assert text.endswith(Color.RESET.value)


def test_log_debug_only_in_debug_mode(monkeypatch, capsys):
    monkeypatch.setenv("GRIDSIM_NO_COLOR", "1")

    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    log_debug("hidden")
    assert capsys.readouterr().out == ""

    monkeypatch.setattr(Config, "LOG_LEVEL", "debug")
    log_debug("shown")
    assert "shown" in capsys.readouterr().out


def test_tags_mark_message_type(monkeypatch, capsys):
    monkeypatch.setenv("GRIDSIM_NO_COLOR", "1")

    log_success("route found")
    log_error("no route")

    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"{LOG_TAG_SUCCESS} route found", f"{LOG_TAG_ERROR} no route"]


def test_config_validate(monkeypatch):
    monkeypatch.setattr(Config, "DEAD_END_PENALTY", 10)
    monkeypatch.setattr(Config, "DEFAULT_ALGORITHM", "wave")
    Config.validate()

    monkeypatch.setattr(Config, "DEAD_END_PENALTY", 1)
    with pytest.raises(ValueError, match="GRIDSIM_DEAD_END_PENALTY"):
        Config.validate()

    monkeypatch.setattr(Config, "DEAD_END_PENALTY", 10)
    monkeypatch.setattr(Config, "DEFAULT_ALGORITHM", "dijkstra")
    with pytest.raises(ValueError, match="GRIDSIM_DEFAULT_ALGORITHM"):
        Config.validate()


def test_config_display(monkeypatch):
    monkeypatch.setattr(Config, "DEAD_END_PENALTY", 10)
    summary = Config.display()
    assert summary.startswith("Gridsim Configuration:")
    assert "Dead-end Penalty: x10" in summary


def test_log_penalty_is_yellow_debug_output(monkeypatch, capsys):
    monkeypatch.delenv("GRIDSIM_NO_COLOR", raising=False)

    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    log_penalty("dead end")
    assert capsys.readouterr().out == ""

    monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")
    log_penalty("dead end")
    out = capsys.readouterr().out
    assert out.startswith(Color.YELLOW.value + LOG_TAG_PENALTY)
    assert "dead end" in out
