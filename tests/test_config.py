"""Tests for configuration loading."""

import pytest

from edpsych_kb.utils.config import Config, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("EDPSYCH_KB_CONFIG", "EDPSYCH_KB_LOG_LEVEL", "EDPSYCH_KB_CORPUS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_file_missing(tmp_path):
    config = load_config(str(tmp_path / "missing.yaml"))
    assert config == Config()
    assert config.retrieval.default_limit == 5
    assert config.composer.top_n == 3
    assert config.knowledge.load_defaults is True


def test_values_from_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "retrieval:\n"
        "  default_limit: 8\n"
        "  exact_match_weight: 3\n"
        "composer:\n"
        "  top_n: 1\n"
        "  follow_up_enabled: false\n"
        "knowledge:\n"
        "  load_defaults: false\n"
        "  corpus_path: data/corpus.yaml\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8"
    )

    config = load_config(str(path))

    assert config.retrieval.default_limit == 8
    assert config.retrieval.exact_match_weight == 3.0
    assert config.retrieval.partial_match_weight == 1.0
    assert config.composer.top_n == 1
    assert config.composer.follow_up_enabled is False
    assert config.knowledge.load_defaults is False
    assert config.knowledge.corpus_path == "data/corpus.yaml"
    assert config.logging.level == "DEBUG"


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("logging:\n  level: WARNING\n", encoding="utf-8")
    monkeypatch.setenv("EDPSYCH_KB_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("EDPSYCH_KB_CORPUS", "/srv/corpus.json")

    config = load_config(str(path))

    assert config.logging.level == "ERROR"
    assert config.knowledge.corpus_path == "/srv/corpus.json"


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "other.yaml"
    path.write_text("composer:\n  top_n: 7\n", encoding="utf-8")
    monkeypatch.setenv("EDPSYCH_KB_CONFIG", str(path))

    assert load_config().composer.top_n == 7
