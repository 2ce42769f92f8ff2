"""Tests for the command-line front end."""

import json

import pytest

from edpsych_kb.main import main
from edpsych_kb.rag.composer import DEFAULT_RESPONSES, GENERIC_FOLLOW_UP
from edpsych_kb.models.entry import Role


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    for name in ("EDPSYCH_KB_CONFIG", "EDPSYCH_KB_LOG_LEVEL", "EDPSYCH_KB_CORPUS"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "settings.yaml"
    path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
    return str(path)


def test_ask(config_file, capsys):
    assert main(["-c", config_file, "ask", "assessment", "--role", "teacher"]) == 0

    out = capsys.readouterr().out
    assert "Assessments help us understand each student's unique profile." in out


def test_ask_with_matches(config_file, capsys):
    assert main(["-c", config_file, "ask", "assessment", "-r", "parent", "--show-matches"]) == 0

    out = capsys.readouterr().out
    assert "Matches:" in out
    assert "assessment_overview [assessment]" in out


def test_ask_without_match(config_file, capsys):
    assert main(["-c", config_file, "ask", "photosynthesis", "-r", "parent", "--show-matches"]) == 0

    out = capsys.readouterr().out
    assert DEFAULT_RESPONSES[Role.PARENT] in out
    assert "(none)" in out


def test_stats(config_file, capsys):
    assert main(["-c", config_file, "stats"]) == 0

    stats = json.loads(capsys.readouterr().out)
    assert stats["total_entries"] == 9
    assert stats["categories_count"] == 6


def test_chat_tracks_topics(config_file, capsys, monkeypatch):
    replies = iter(["hello", "hello", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))

    assert main(["-c", config_file, "chat", "--role", "student"]) == 0

    out = capsys.readouterr().out
    assert out.count(GENERIC_FOLLOW_UP) == 1
    assert "Goodbye!" in out


def test_missing_corpus_fails(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("EDPSYCH_KB_CONFIG", raising=False)
    monkeypatch.setenv("EDPSYCH_KB_CORPUS", str(tmp_path / "missing.json"))
    path = tmp_path / "settings.yaml"
    path.write_text("logging:\n  level: CRITICAL\n", encoding="utf-8")

    assert main(["-c", str(path), "stats"]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()
