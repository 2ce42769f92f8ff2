"""Data models for knowledge entries and conversation context."""

from .entry import KnowledgeEntry, KnowledgeStats, Role, RoleContent
from .context import ConversationContext, UserPreferences

__all__ = [
    "KnowledgeEntry",
    "KnowledgeStats",
    "Role",
    "RoleContent",
    "ConversationContext",
    "UserPreferences"
]
