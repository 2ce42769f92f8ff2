"""Knowledge retriever.

Scores entries against a free-text query using the keyword index and
returns the best matches the requester's role is allowed to see.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .knowledge_store import KnowledgeStore, StoreSnapshot
from ..models.entry import KnowledgeEntry, Role, RoleLike
from ..utils.logger import get_logger

logger = get_logger(__name__)


def tokenize(query: str) -> List[str]:
    """Split a query on whitespace into lower-cased tokens."""
    return query.lower().split()


def keyword_matches(token: str, keyword: str) -> bool:
    """Either string contains the other."""
    return token in keyword or keyword in token


@dataclass
class ScoredEntry:
    """An entry together with its accumulated relevance score."""
    entry: KnowledgeEntry
    score: float


class KnowledgeRetriever:
    """
    Ranks knowledge entries for a query and role.

    For every (token, keyword) pair that matches, each eligible entry under
    that keyword accrues ``weight * confidence``, where the weight is
    higher for an exact match than for a substring match. Contributions sum.
    Entries the role may not see never accrue a score.

    Ties keep store order, so results are deterministic.
    """

    def __init__(
        self,
        store: KnowledgeStore,
        default_limit: int = 5,
        exact_match_weight: float = 2.0,
        partial_match_weight: float = 1.0
    ):
        """
        Initialize retriever.

        Args:
            store: Knowledge store to search
            default_limit: Result count when no limit is given
            exact_match_weight: Weight when token equals keyword
            partial_match_weight: Weight when one contains the other
        """
        self.store = store
        self.default_limit = default_limit
        self.exact_match_weight = exact_match_weight
        self.partial_match_weight = partial_match_weight

    def score_entries(self, query: str, role: RoleLike) -> List[ScoredEntry]:
        """
        Score every eligible entry reachable from the query tokens.

        Args:
            query: Free-text query
            role: Requester role

        Returns:
            Entries with a positive score, best first
        """
        tokens = tokenize(query)
        parsed_role = Role.parse(role)
        if not tokens or parsed_role is None:
            return []

        snapshot: StoreSnapshot = self.store.snapshot()
        scores: Dict[str, float] = {}

        for token in tokens:
            for keyword, entry_ids in snapshot.index.keyword_index.items():
                if not keyword_matches(token, keyword):
                    continue

                weight = self.exact_match_weight if token == keyword else self.partial_match_weight
                for entry_id in entry_ids:
                    entry = snapshot.entries.get(entry_id)
                    if entry is None or parsed_role not in entry.eligible_roles:
                        continue
                    scores[entry_id] = scores.get(entry_id, 0.0) + weight * entry.confidence

        ranked = sorted(
            (entry_id for entry_id, score in scores.items() if score > 0),
            key=lambda entry_id: (-scores[entry_id], snapshot.positions[entry_id])
        )
        return [ScoredEntry(entry=snapshot.entries[entry_id], score=scores[entry_id]) for entry_id in ranked]

    def find_relevant_entries(
        self,
        query: str,
        role: RoleLike,
        limit: Optional[int] = None
    ) -> List[KnowledgeEntry]:
        """
        Find the most relevant entries for a query.

        Args:
            query: Free-text query
            role: Requester role
            limit: Maximum number of entries (default_limit if None)

        Returns:
            Ranked list of at most ``limit`` entries
        """
        if limit is None:
            limit = self.default_limit
        if limit <= 0:
            return []

        scored = self.score_entries(query, role)
        results = [item.entry for item in scored[:limit]]

        logger.debug(
            f"Query {query[:50]!r} for role {role!r}: "
            f"{len(scored)} scored, returning {[entry.id for entry in results]}"
        )
        return results
