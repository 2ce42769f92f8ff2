"""Knowledge store for the retrieval engine.

Holds the authoritative set of knowledge entries in memory. Every write
rebuilds the category and keyword indices into fresh structures and then
publishes entries and indices together as one immutable snapshot, so a
reader always sees an index that matches the entries it was built from.
"""

import dataclasses
import threading
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .indexer import KnowledgeIndex, build_indices
from ..models.entry import KnowledgeEntry, KnowledgeStats, parse_confidence
from ..utils.logger import get_logger

logger = get_logger(__name__)

_UPDATABLE_FIELDS = frozenset(
    f.name for f in dataclasses.fields(KnowledgeEntry)
) - {"id", "last_updated"}


class EntryNotFoundError(KeyError):
    """Raised by KnowledgeStore.require for an unknown entry id."""

    def __init__(self, entry_id: str):
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"Knowledge entry not found: {self.entry_id}"


@dataclass(frozen=True)
class StoreSnapshot:
    """Entries plus the indices built from them, published atomically."""
    entries: Mapping[str, KnowledgeEntry] = field(
        default_factory=lambda: MappingProxyType({})
    )
    index: KnowledgeIndex = field(default_factory=KnowledgeIndex)
    positions: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )


class KnowledgeStore:
    """
    In-memory store of knowledge entries.

    Writers are serialized by a lock. Readers never lock: they take the
    current snapshot once and work against it.
    """

    def __init__(self, entries: Optional[Iterable[KnowledgeEntry]] = None):
        """
        Initialize knowledge store.

        Args:
            entries: Optional initial entries
        """
        self._lock = threading.Lock()
        self._entries: Dict[str, KnowledgeEntry] = {}
        self._snapshot = StoreSnapshot()

        if entries:
            self.insert_many(entries)

    def _publish(self) -> None:
        """Rebuild indices and swap in a new snapshot. Caller holds the lock."""
        entries = dict(self._entries)
        self._snapshot = StoreSnapshot(
            entries=MappingProxyType(entries),
            index=build_indices(entries.values()),
            positions=MappingProxyType({entry_id: i for i, entry_id in enumerate(entries)})
        )

    def snapshot(self) -> StoreSnapshot:
        """Current published snapshot."""
        return self._snapshot

    def insert(self, entry: KnowledgeEntry) -> None:
        """
        Add a knowledge entry.

        An entry with the same id is replaced and keeps its original
        position in the store order.
        """
        self.insert_many([entry])

    def insert_many(self, entries: Iterable[KnowledgeEntry]) -> int:
        """
        Add several entries with a single index rebuild.

        Returns:
            Number of entries inserted
        """
        count = 0
        with self._lock:
            for entry in entries:
                if entry.id in self._entries:
                    logger.warning(f"Overwriting existing knowledge entry: {entry.id}")
                self._entries[entry.id] = entry
                count += 1
            self._publish()

        logger.debug(f"Inserted {count} knowledge entries")
        return count

    def update(self, entry_id: str, updates: Dict[str, Any]) -> bool:
        """
        Merge fields into an existing entry.

        List and set fields (keywords, eligible_roles, provenance) are
        replaced as a whole, not merged element-wise.

        Args:
            entry_id: Id of the entry to update
            updates: Field name to new value

        Returns:
            False if no entry has this id, True otherwise
        """
        with self._lock:
            entry = self._entries.get(entry_id)
            if entry is None:
                logger.debug(f"Update for unknown knowledge entry: {entry_id}")
                return False

            changes = {}
            for name, value in updates.items():
                if name not in _UPDATABLE_FIELDS:
                    logger.warning(f"Ignoring non-updatable field '{name}' for entry {entry_id}")
                    continue
                if name == "confidence" and parse_confidence(value) is None:
                    logger.warning(
                        f"Ignoring non-numeric confidence {value!r} for entry {entry_id}, "
                        f"keeping {entry.confidence}"
                    )
                    continue
                changes[name] = value

            self._entries[entry_id] = dataclasses.replace(
                entry, **changes, last_updated=datetime.now()
            )
            self._publish()

        logger.info(f"Updated knowledge entry {entry_id}: {sorted(changes)}")
        return True

    def get(self, entry_id: str) -> Optional[KnowledgeEntry]:
        """Get a knowledge entry by ID."""
        return self._snapshot.entries.get(entry_id)

    def require(self, entry_id: str) -> KnowledgeEntry:
        """Get a knowledge entry by ID or raise EntryNotFoundError."""
        entry = self.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    def get_all(self) -> List[KnowledgeEntry]:
        """Get all knowledge entries in store order."""
        return list(self._snapshot.entries.values())

    def get_by_category(self, category: str) -> List[KnowledgeEntry]:
        """Get all knowledge entries in a category."""
        snapshot = self._snapshot
        return [snapshot.entries[entry_id] for entry_id in snapshot.index.ids_for_category(category)]

    def categories(self) -> List[str]:
        return list(self._snapshot.index.category_index)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()
            self._publish()
        logger.info("Cleared knowledge store")

    def statistics(self) -> KnowledgeStats:
        """Entry count, category count, mean confidence and latest update."""
        snapshot = self._snapshot
        entries = list(snapshot.entries.values())

        if not entries:
            return KnowledgeStats(
                total_entries=0,
                categories_count=0,
                average_confidence=0.0,
                last_updated=None
            )

        return KnowledgeStats(
            total_entries=len(entries),
            categories_count=len(snapshot.index.category_index),
            average_confidence=sum(entry.confidence for entry in entries) / len(entries),
            last_updated=max(entry.last_updated for entry in entries)
        )

    def __len__(self) -> int:
        return len(self._snapshot.entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._snapshot.entries
