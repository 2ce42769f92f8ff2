"""Index builder for the knowledge store.

Derives the category and keyword lookup tables from the store contents.
Building is a pure function of the entries passed in: the same entries in
the same order always produce the same index.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ..models.entry import KnowledgeEntry


def _freeze(table: Dict[str, List[str]]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({key: tuple(ids) for key, ids in table.items()})


@dataclass(frozen=True)
class KnowledgeIndex:
    """Read-only category and keyword indices over a set of entries."""
    category_index: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    keyword_index: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def ids_for_category(self, category: str) -> Tuple[str, ...]:
        return self.category_index.get(category, ())

    def ids_for_keyword(self, keyword: str) -> Tuple[str, ...]:
        return self.keyword_index.get(keyword.strip().lower(), ())


def build_indices(entries: Iterable[KnowledgeEntry]) -> KnowledgeIndex:
    """
    Build fresh category and keyword indices.

    Args:
        entries: Entries in store order

    Returns:
        KnowledgeIndex whose id tuples follow the order of ``entries``
    """
    category_index: Dict[str, List[str]] = {}
    keyword_index: Dict[str, List[str]] = {}

    for entry in entries:
        ids = category_index.setdefault(entry.category, [])
        if entry.id not in ids:
            ids.append(entry.id)

        for keyword in entry.normalized_keywords():
            ids = keyword_index.setdefault(keyword, [])
            if entry.id not in ids:
                ids.append(entry.id)

    return KnowledgeIndex(
        category_index=_freeze(category_index),
        keyword_index=_freeze(keyword_index)
    )
