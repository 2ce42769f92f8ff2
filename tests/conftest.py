"""Shared fixtures for the knowledge engine tests."""

import logging
from datetime import datetime

import pytest

from edpsych_kb.engine import KnowledgeEngine
from edpsych_kb.models.entry import KnowledgeEntry, Role, RoleContent
from edpsych_kb.rag.knowledge_store import KnowledgeStore


def make_entry(entry_id, keywords, roles, confidence=0.9, category="general", **kwargs):
    """Build a KnowledgeEntry with compact defaults."""
    content = kwargs.pop("content", RoleContent(general=f"G-{entry_id}"))
    return KnowledgeEntry(
        id=entry_id,
        category=category,
        keywords=keywords,
        eligible_roles=roles,
        content=content,
        confidence=confidence,
        **kwargs
    )


@pytest.fixture
def entry_a():
    return make_entry(
        "A",
        ["restorative justice", "behaviour management"],
        [Role.TEACHER, Role.PARENT],
        confidence=0.98,
        category="restorative_justice",
        content=RoleContent(general="G-A", overrides={Role.TEACHER: "T-A"}),
        provenance=["Doctoral research"],
        last_updated=datetime(2024, 1, 1, 9, 0)
    )


@pytest.fixture
def entry_b():
    return make_entry(
        "B",
        ["assessment", "testing"],
        [Role.TEACHER],
        confidence=0.97,
        category="assessment",
        content=RoleContent(general="G-B"),
        last_updated=datetime(2024, 3, 1, 9, 0)
    )


@pytest.fixture
def store(entry_a, entry_b):
    return KnowledgeStore([entry_a, entry_b])


@pytest.fixture
def engine(entry_a, entry_b):
    """Engine seeded with only entries A and B."""
    engine = KnowledgeEngine(load_defaults=False)
    engine.initialize([entry_a, entry_b])
    return engine


@pytest.fixture
def default_engine():
    """Engine seeded with the built-in knowledge."""
    engine = KnowledgeEngine()
    engine.initialize()
    return engine


@pytest.fixture(autouse=True)
def detach_log_handlers():
    """Drop handlers bound to per-test captured streams."""
    yield
    logging.getLogger("edpsych_kb").handlers.clear()
