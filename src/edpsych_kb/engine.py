"""Knowledge engine facade.

Wires the store, retriever and composer together behind the API the
conversational front end uses. Instances are created explicitly by the
application and passed to whoever needs them; there is no global.
"""

import threading
from typing import Any, Dict, Iterable, List, Optional

from .models.context import ConversationContext
from .models.entry import KnowledgeEntry, KnowledgeStats, RoleLike
from .rag.composer import ComposedResponse, ResponseComposer
from .rag.corpus import load_corpus
from .rag.default_knowledge import default_entries
from .rag.knowledge_store import KnowledgeStore
from .rag.retriever import KnowledgeRetriever
from .utils.config import Config
from .utils.logger import get_logger

logger = get_logger(__name__)


class KnowledgeEngine:
    """
    Retrieval and response composition over a curated knowledge base.

    Call initialize() once to load the seed knowledge; reset() empties
    the store so the engine can be initialized again.
    """

    def __init__(
        self,
        store: Optional[KnowledgeStore] = None,
        default_limit: int = 5,
        exact_match_weight: float = 2.0,
        partial_match_weight: float = 1.0,
        top_n: int = 3,
        follow_up_enabled: bool = True,
        load_defaults: bool = True,
        corpus_path: Optional[str] = None
    ):
        """
        Initialize the engine.

        Args:
            store: Knowledge store (a new empty one if None)
            default_limit: Default result count for find_relevant_entries
            exact_match_weight: Score weight for an exact keyword match
            partial_match_weight: Score weight for a substring keyword match
            top_n: Entries the composer asks the retriever for
            follow_up_enabled: Append follow-up prompts on first turns
            load_defaults: Load the built-in knowledge on initialize()
            corpus_path: Optional corpus file loaded on initialize()
        """
        self.store = store if store is not None else KnowledgeStore()
        self.retriever = KnowledgeRetriever(
            self.store,
            default_limit=default_limit,
            exact_match_weight=exact_match_weight,
            partial_match_weight=partial_match_weight
        )
        self.composer = ResponseComposer(
            self.retriever,
            top_n=top_n,
            follow_up_enabled=follow_up_enabled
        )
        self.load_defaults = load_defaults
        self.corpus_path = corpus_path

        self._lifecycle_lock = threading.Lock()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self, entries: Optional[Iterable[KnowledgeEntry]] = None) -> None:
        """
        Load seed knowledge. Repeat calls do nothing until reset().

        Args:
            entries: Extra entries inserted after defaults and corpus file

        Raises:
            CorpusError: If the configured corpus file cannot be loaded
        """
        with self._lifecycle_lock:
            if self._initialized:
                logger.debug("Knowledge engine already initialized")
                return

            seed: List[KnowledgeEntry] = []
            if self.load_defaults:
                seed.extend(default_entries())
            if self.corpus_path:
                seed.extend(load_corpus(self.corpus_path))
            if entries:
                seed.extend(entries)

            if seed:
                self.store.insert_many(seed)
            self._initialized = True

        stats = self.store.statistics()
        logger.info(
            f"Knowledge engine initialized with {stats.total_entries} entries "
            f"in {stats.categories_count} categories"
        )

    def reset(self) -> None:
        """Remove all entries and return to the uninitialized state."""
        with self._lifecycle_lock:
            self.store.clear()
            self._initialized = False
        logger.info("Knowledge engine reset")

    def find_relevant_entries(
        self,
        query: str,
        role: RoleLike,
        limit: Optional[int] = None
    ) -> List[KnowledgeEntry]:
        """Ranked entries matching the query that the role may see."""
        return self.retriever.find_relevant_entries(query, role, limit)

    def generate_response(self, query: str, context: ConversationContext) -> str:
        """Role-appropriate answer text for the query."""
        return self.composer.generate_response(query, context)

    def compose(self, query: str, context: ConversationContext) -> ComposedResponse:
        """Answer text together with the entry it came from."""
        return self.composer.compose(query, context)

    def insert(self, entry: KnowledgeEntry) -> None:
        self.store.insert(entry)

    def update(self, entry_id: str, updates: Dict[str, Any]) -> bool:
        return self.store.update(entry_id, updates)

    def get(self, entry_id: str) -> Optional[KnowledgeEntry]:
        return self.store.get(entry_id)

    def statistics(self) -> KnowledgeStats:
        return self.store.statistics()


def create_engine(config: Config, initialize: bool = True) -> KnowledgeEngine:
    """
    Create an engine from configuration.

    Args:
        config: Loaded configuration
        initialize: Load seed knowledge immediately

    Returns:
        KnowledgeEngine instance
    """
    engine = KnowledgeEngine(
        default_limit=config.retrieval.default_limit,
        exact_match_weight=config.retrieval.exact_match_weight,
        partial_match_weight=config.retrieval.partial_match_weight,
        top_n=config.composer.top_n,
        follow_up_enabled=config.composer.follow_up_enabled,
        load_defaults=config.knowledge.load_defaults,
        corpus_path=config.knowledge.corpus_path
    )
    if initialize:
        engine.initialize()
    return engine
