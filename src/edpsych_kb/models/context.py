"""Per-call conversation context supplied by the caller."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .entry import Role


@dataclass
class UserPreferences:
    """Optional response hints. Carried with the context, not used in composition."""
    response_length: Optional[str] = None       # brief, detailed, comprehensive
    focus_areas: List[str] = field(default_factory=list)
    communication_style: Optional[str] = None   # formal, conversational, supportive


@dataclass
class ConversationContext:
    """Conversation state for a single request. Never stored by the engine."""
    role: Union[Role, str]
    previous_topics: List[str] = field(default_factory=list)
    session_history: List[str] = field(default_factory=list)
    preferences: Optional[UserPreferences] = None

    @property
    def is_first_turn(self) -> bool:
        """True when no topic has been surfaced yet in this session."""
        return not self.previous_topics
