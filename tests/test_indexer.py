"""Tests for the index builder."""

import pytest

from edpsych_kb.models.entry import Role
from edpsych_kb.rag.indexer import KnowledgeIndex, build_indices

from conftest import make_entry


def test_keywords_are_lower_cased(entry_a):
    index = build_indices([entry_a])
    assert set(index.keyword_index) == {"restorative justice", "behaviour management"}
    assert index.ids_for_keyword("Restorative Justice") == ("A",)


def test_category_index(entry_a, entry_b):
    extra = make_entry("C", ["circles"], [Role.TEACHER], category="restorative_justice")
    index = build_indices([entry_a, entry_b, extra])

    assert index.ids_for_category("restorative_justice") == ("A", "C")
    assert index.ids_for_category("assessment") == ("B",)
    assert index.ids_for_category("missing") == ()


def test_shared_keyword_lists_every_entry_in_order():
    first = make_entry("first", ["Inclusion"], [Role.TEACHER])
    second = make_entry("second", ["inclusion", "INCLUSION"], [Role.PARENT])

    index = build_indices([first, second])
    assert index.keyword_index["inclusion"] == ("first", "second")


def test_blank_keywords_not_indexed():
    entry = make_entry("x", ["", "   ", "real"], [Role.TEACHER])
    assert list(build_indices([entry]).keyword_index) == ["real"]


def test_build_is_deterministic(entry_a, entry_b):
    assert build_indices([entry_a, entry_b]) == build_indices([entry_a, entry_b])


def test_empty_input():
    index = build_indices([])
    assert dict(index.category_index) == {}
    assert dict(index.keyword_index) == {}
    assert index == KnowledgeIndex()


def test_index_is_read_only(entry_a):
    index = build_indices([entry_a])
    with pytest.raises(TypeError):
        index.keyword_index["new"] = ("A",)
