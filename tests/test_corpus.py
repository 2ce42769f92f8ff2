"""Tests for corpus file loading."""

import json

import pytest
import yaml

from edpsych_kb.models.entry import Role
from edpsych_kb.rag.corpus import CorpusError, load_corpus


YAML_CORPUS = """
version: "1.0"
entries:
  - id: sleep_hygiene
    category: wellbeing
    keywords: [sleep, bedtime routine]
    eligible_roles: [parent, student]
    content:
      general: Regular sleep supports learning.
      parent: A consistent bedtime routine helps.
    provenance: [Sleep research review]
    confidence: 0.9
    last_updated: "2024-05-01T10:00:00"
"""


def test_load_yaml(tmp_path):
    path = tmp_path / "corpus.yaml"
    path.write_text(YAML_CORPUS, encoding="utf-8")

    entries = load_corpus(str(path))

    assert len(entries) == 1
    entry = entries[0]
    assert entry.id == "sleep_hygiene"
    assert entry.eligible_roles == frozenset({Role.PARENT, Role.STUDENT})
    assert entry.text_for("parent") == "A consistent bedtime routine helps."
    assert entry.text_for("student") == "Regular sleep supports learning."
    assert entry.last_updated.year == 2024


def test_load_json_list(tmp_path, entry_a, entry_b):
    path = tmp_path / "corpus.json"
    path.write_text(json.dumps([entry_a.to_dict(), entry_b.to_dict()]), encoding="utf-8")

    assert load_corpus(str(path)) == [entry_a, entry_b]


def test_empty_yaml(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_corpus(str(path)) == []


def test_missing_file(tmp_path):
    with pytest.raises(CorpusError, match="not found"):
        load_corpus(str(tmp_path / "missing.json"))


def test_malformed_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CorpusError):
        load_corpus(str(path))


def test_entry_without_general_text(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({
        "entries": [{"id": "x", "category": "c", "content": {"teacher": "only"}}]
    }), encoding="utf-8")

    with pytest.raises(CorpusError, match="entry #0"):
        load_corpus(str(path))


def test_scalar_document_rejected(tmp_path):
    path = tmp_path / "scalar.yaml"
    path.write_text("just a string", encoding="utf-8")
    with pytest.raises(CorpusError):
        load_corpus(str(path))
