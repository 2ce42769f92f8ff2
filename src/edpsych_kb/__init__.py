"""Knowledge retrieval and response composition for educational psychology."""

from .engine import KnowledgeEngine, create_engine
from .models import ConversationContext, KnowledgeEntry, Role, RoleContent

__version__ = "0.1.0"

__all__ = [
    "KnowledgeEngine",
    "create_engine",
    "ConversationContext",
    "KnowledgeEntry",
    "Role",
    "RoleContent"
]
