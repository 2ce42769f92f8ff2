"""Keyword retrieval and response composition over curated knowledge."""

from .knowledge_store import KnowledgeStore, EntryNotFoundError, StoreSnapshot
from .indexer import KnowledgeIndex, build_indices
from .retriever import KnowledgeRetriever, ScoredEntry
from .composer import ResponseComposer, ComposedResponse
from .corpus import CorpusError, load_corpus
from .default_knowledge import default_entries

__all__ = [
    "KnowledgeStore",
    "EntryNotFoundError",
    "StoreSnapshot",
    "KnowledgeIndex",
    "build_indices",
    "KnowledgeRetriever",
    "ScoredEntry",
    "ResponseComposer",
    "ComposedResponse",
    "CorpusError",
    "load_corpus",
    "default_entries"
]
